"""SAN token classification.

A cleaned token takes one of three shapes:

* castle: ``O-O`` / ``O-O-O`` (``0-0`` / ``0-0-0`` accepted)
* pawn move: ``[file 'x'] target ['=' piece]``
* piece move: ``piece [file] [rank] ['x'] target``

The target square is always the last two characters once the promotion
suffix is removed. Whatever precedes it holds at most one file hint and
at most one rank hint, in that order.
"""

from __future__ import annotations

from dataclasses import dataclass

from pgncoord.core.enums import CastleSide, PieceType
from pgncoord.core.errors import MalformedToken
from pgncoord.core.types import FILES, RANKS, Square, parse_square

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}
_PROMOTION_PIECES = frozenset("NBRQ")

_CASTLES: dict[str, CastleSide] = {
    "O-O": CastleSide.KINGSIDE,
    "0-0": CastleSide.KINGSIDE,
    "O-O-O": CastleSide.QUEENSIDE,
    "0-0-0": CastleSide.QUEENSIDE,
}

_TRAILING_MARKS = "+#!?"


@dataclass(frozen=True, slots=True)
class ParsedToken:
    """Fields extracted from one SAN token; consumed by the resolver."""

    san: str
    piece_type: PieceType
    to_sq: Square | None = None
    from_file: int | None = None
    from_rank: int | None = None
    is_capture: bool = False
    promotion: PieceType | None = None
    castle: CastleSide | None = None

    @property
    def is_castle(self) -> bool:
        return self.castle is not None


def clean_token(token: str) -> str:
    """Strip check, mate and annotation marks, e.g. ``Nf3+!`` → ``Nf3``."""
    return token.strip().rstrip(_TRAILING_MARKS)


def classify(token: str) -> ParsedToken:
    """Classify a SAN *token* and extract its fields.

    Raises:
        MalformedToken: if the token matches no SAN shape.
    """
    clean = clean_token(token)

    castle = _CASTLES.get(clean)
    if castle is not None:
        return ParsedToken(san=clean, piece_type=PieceType.KING, castle=castle)

    if len(clean) < 2:
        raise MalformedToken(token, "too short")

    lead = clean[0]
    if lead in FILES:
        return _classify_pawn(token, clean)
    if lead in _SAN_PIECE_REV:
        return _classify_piece(token, clean, _SAN_PIECE_REV[lead])
    raise MalformedToken(token, f"unexpected leading character {lead!r}")


def _parse_target(token: str, text: str) -> Square:
    try:
        return parse_square(text)
    except ValueError:
        raise MalformedToken(token, f"invalid target square {text!r}") from None


def _classify_pawn(token: str, clean: str) -> ParsedToken:
    body = clean
    promotion: PieceType | None = None

    # Promotion suffix: "=Q" or a bare trailing piece letter ("e8Q").
    if "=" in body:
        body, _, suffix = body.partition("=")
        if len(suffix) != 1 or suffix not in _PROMOTION_PIECES:
            raise MalformedToken(token, f"invalid promotion {suffix!r}")
        promotion = _SAN_PIECE_REV[suffix]
    elif body[-1] in _PROMOTION_PIECES:
        promotion = _SAN_PIECE_REV[body[-1]]
        body = body[:-1]

    from_file: int | None = None
    is_capture = False
    if len(body) > 1 and body[1] == "x":
        from_file = FILES.index(body[0])
        is_capture = True
        body = body[2:]

    if len(body) != 2:
        raise MalformedToken(token, "expected a two-character target square")
    to_sq = _parse_target(token, body)

    if promotion is not None and body[1] not in "18":
        raise MalformedToken(token, "promotion off the last rank")

    return ParsedToken(
        san=clean,
        piece_type=PieceType.PAWN,
        to_sq=to_sq,
        from_file=from_file,
        is_capture=is_capture,
        promotion=promotion,
    )


def _classify_piece(token: str, clean: str, piece_type: PieceType) -> ParsedToken:
    if "=" in clean:
        raise MalformedToken(token, "only pawns can promote")
    if len(clean) < 3:
        raise MalformedToken(token, "expected a two-character target square")

    to_sq = _parse_target(token, clean[-2:])
    prefix = clean[1:-2]

    is_capture = prefix.endswith("x")
    if is_capture:
        prefix = prefix[:-1]

    from_file: int | None = None
    from_rank: int | None = None
    if prefix and prefix[0] in FILES:
        from_file = FILES.index(prefix[0])
        prefix = prefix[1:]
    if prefix and prefix[0] in RANKS:
        from_rank = RANKS.index(prefix[0])
        prefix = prefix[1:]
    if prefix:
        raise MalformedToken(token, f"unexpected disambiguation {prefix!r}")

    return ParsedToken(
        san=clean,
        piece_type=piece_type,
        to_sq=to_sq,
        from_file=from_file,
        from_rank=from_rank,
        is_capture=is_capture,
    )
