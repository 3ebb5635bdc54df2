"""Candidate resolution: narrow a parsed token to one legal origin square."""

from __future__ import annotations

from pgncoord.core.enums import Color
from pgncoord.core.errors import AmbiguousMove, MalformedToken, UnresolvedMove
from pgncoord.core.move import ResolvedMove, castle_squares
from pgncoord.core.types import Square, file_of, rank_of
from pgncoord.notation.tokens import ParsedToken
from pgncoord.oracle.interfaces import IPositionOracle


def resolve(parsed: ParsedToken, color: Color, oracle: IPositionOracle) -> Square:
    """Return the unique origin square for *parsed* with *color* to move.

    Candidates are the squares holding a piece of the token's type and
    *color*, filtered by file hint, rank hint and finally legality.
    There is no tie-break: surviving ties are an error.

    Raises:
        MalformedToken: if *parsed* is a castle (see :func:`resolve_castle`).
        UnresolvedMove: if no candidate survives.
        AmbiguousMove: if more than one candidate survives.
    """
    if parsed.is_castle or parsed.to_sq is None:
        raise MalformedToken(parsed.san, "castles have no origin to resolve")
    target = parsed.to_sq

    candidates = sorted(oracle.occupied(color, parsed.piece_type))
    if parsed.from_file is not None:
        candidates = [sq for sq in candidates if file_of(sq) == parsed.from_file]
    if parsed.from_rank is not None:
        candidates = [sq for sq in candidates if rank_of(sq) == parsed.from_rank]
    legal = [
        sq
        for sq in candidates
        if oracle.is_legal(sq, target, color, parsed.promotion)
    ]

    if len(legal) == 1:
        return legal[0]
    if not legal:
        raise UnresolvedMove(parsed.san, target)
    raise AmbiguousMove(parsed.san, target, legal)


def resolve_move(
    parsed: ParsedToken, color: Color, oracle: IPositionOracle
) -> ResolvedMove:
    """Resolve a non-castle token into a full :class:`ResolvedMove`."""
    origin = resolve(parsed, color, oracle)
    return ResolvedMove(
        from_sq=origin,
        to_sq=parsed.to_sq,  # type: ignore[arg-type]
        promotion=parsed.promotion,
        san=parsed.san,
    )


def resolve_castle(
    parsed: ParsedToken,
    color: Color,
    oracle: IPositionOracle,
    *,
    verify: bool = False,
) -> ResolvedMove:
    """Resolve a castle token to the king's fixed squares.

    With *verify* the oracle must confirm the king move is legal.

    Raises:
        MalformedToken: if *parsed* is not a castle.
        UnresolvedMove: if *verify* is set and castling is not legal.
    """
    if parsed.castle is None:
        raise MalformedToken(parsed.san, "not a castle")
    king_from, king_to = castle_squares(parsed.castle, color)
    if verify and not oracle.is_legal(king_from, king_to, color):
        raise UnresolvedMove(parsed.san, king_to)
    return ResolvedMove(
        from_sq=king_from,
        to_sq=king_to,
        castle=parsed.castle,
        san=parsed.san,
    )
