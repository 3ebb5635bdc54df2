"""MoveInterpreter: turns SAN movetext into resolved coordinate moves.

Sequences: classify → resolve → oracle.apply → toggle side-to-move.
A token that fails to resolve is recorded and skipped; side-to-move and
the oracle position are left untouched so later tokens still resolve
against the last good position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pgncoord.config import InterpreterOptions
from pgncoord.core.enums import Color
from pgncoord.core.errors import GameAborted, OracleError, SanError
from pgncoord.core.move import ResolvedMove
from pgncoord.notation.fen import fen_side_to_move
from pgncoord.notation.pgn import movetext_tokens
from pgncoord.notation.resolver import resolve_castle, resolve_move
from pgncoord.notation.tokens import classify
from pgncoord.oracle.board_oracle import BoardOracle
from pgncoord.oracle.interfaces import IPositionOracle

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenFailure:
    """A token that could not be resolved, with the reason."""

    token: str
    error: SanError
    ply: int
    color: Color

    def __str__(self) -> str:
        return f"?{self.token}"


MoveOutcome = ResolvedMove | TokenFailure


class MoveInterpreter:
    """Owns side-to-move and exactly one position oracle.

    Not thread-safe; run independent games on separate instances.

    Args:
        oracle: Position oracle; a fresh :class:`BoardOracle` by default.
        options: Behaviour switches.
        start_fen: Starting position. The oracle is reset to it and its
            active color becomes the side to move. Without it, an injected
            oracle must be at a White-to-move position (or call
            :meth:`reset` with a FEN).
    """

    __slots__ = ("_oracle", "_options", "_side_to_move", "_ply")

    def __init__(
        self,
        oracle: IPositionOracle | None = None,
        options: InterpreterOptions | None = None,
        start_fen: str | None = None,
    ) -> None:
        self._oracle = oracle if oracle is not None else BoardOracle()
        self._options = options or InterpreterOptions()
        self._side_to_move = Color.WHITE
        self._ply = 0
        if start_fen is not None:
            self.reset(start_fen)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def oracle(self) -> IPositionOracle:
        return self._oracle

    @property
    def options(self) -> InterpreterOptions:
        return self._options

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def ply(self) -> int:
        """Number of moves applied since the last reset."""
        return self._ply

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self, start_fen: str | None = None) -> None:
        """Return to the starting position (or *start_fen*) with its side to move."""
        side = Color.WHITE if start_fen is None else fen_side_to_move(start_fen)
        self._oracle.reset(start_fen)
        self._side_to_move = side
        self._ply = 0

    # ── Processing ───────────────────────────────────────────────────────

    def process(self, movetext: str) -> list[MoveOutcome]:
        """Resolve every SAN token of *movetext* in order.

        Raises:
            GameAborted: if the oracle rejects a move the resolver accepted.
        """
        return self.process_tokens(movetext_tokens(movetext))

    def process_tokens(self, tokens: Iterable[str]) -> list[MoveOutcome]:
        """Resolve pre-split SAN *tokens* in order."""
        outcomes: list[MoveOutcome] = []
        for token in tokens:
            try:
                outcomes.append(self.process_token(token))
            except SanError as exc:
                _LOGGER.warning("Could not process move %r: %s", token, exc)
                outcomes.append(
                    TokenFailure(
                        token=token,
                        error=exc,
                        ply=self._ply,
                        color=self._side_to_move,
                    )
                )
            except OracleError as exc:
                _LOGGER.error("Aborting game at %r: %s", token, exc)
                raise GameAborted(token, outcomes, str(exc)) from exc
        return outcomes

    def process_token(self, token: str) -> ResolvedMove:
        """Resolve and play a single SAN *token*.

        Raises:
            SanError: if the token is malformed, unresolved or ambiguous;
                nothing is changed in that case.
            OracleError: if the oracle disagrees with the resolver.
        """
        color = self._side_to_move
        parsed = classify(token)

        if parsed.castle is not None:
            move = resolve_castle(
                parsed, color, self._oracle, verify=self._options.verify_castling
            )
            self._oracle.apply_castle(parsed.castle, color)
        else:
            move = resolve_move(parsed, color, self._oracle)
            self._oracle.apply(move.from_sq, move.to_sq, move.promotion)

        _LOGGER.debug("%s %s → %s", color, token, move)
        self._side_to_move = color.opposite
        self._ply += 1
        return move
