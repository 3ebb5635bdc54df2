"""Error taxonomy for SAN resolution and oracle interaction.

Per-token failures derive from :class:`SanError` and are collected by the
interpreter. Oracle failures derive from :class:`OracleError` and abort the
current game.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pgncoord.core.types import Square, square_name

if TYPE_CHECKING:
    from pgncoord.core.move import ResolvedMove
    from pgncoord.game.interpreter import TokenFailure


class SanError(ValueError):
    """Base class for a SAN token that could not be turned into a move."""

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class MalformedToken(SanError):
    """Token does not match any recognised SAN shape."""

    def __init__(self, token: str, reason: str = "unrecognised SAN shape") -> None:
        super().__init__(token, f"Malformed move {token!r}: {reason}")
        self.reason = reason


class UnresolvedMove(SanError):
    """No legal origin square remains after filtering."""

    def __init__(self, token: str, target: Square) -> None:
        super().__init__(
            token, f"Illegal move {token!r}: nothing can reach {square_name(target)}"
        )
        self.target = target


class AmbiguousMove(SanError):
    """More than one legal origin square remains after filtering."""

    def __init__(
        self, token: str, target: Square, candidates: Iterable[Square]
    ) -> None:
        self.candidates: tuple[Square, ...] = tuple(sorted(candidates))
        names = ", ".join(square_name(sq) for sq in self.candidates)
        super().__init__(
            token,
            f"Ambiguous move {token!r}: {square_name(target)} reachable from {names}",
        )
        self.target = target


class OracleError(RuntimeError):
    """The position oracle rejected an operation the resolver believed valid."""


class IllegalTransitionError(OracleError):
    """The oracle refused to apply a move."""


class OracleDesyncError(OracleError):
    """The side-to-move passed to the oracle disagrees with its own turn."""


class GameAborted(RuntimeError):
    """Processing of one game stopped on an oracle invariant violation."""

    def __init__(
        self,
        token: str,
        outcomes: list[ResolvedMove | TokenFailure],
        reason: str,
    ) -> None:
        super().__init__(f"Game aborted at {token!r}: {reason}")
        self.token = token
        self.outcomes = outcomes
