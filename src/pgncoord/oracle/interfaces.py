"""Abstract interface for the position oracle.

The interpreter depends on this ABC, not on a concrete board library.
The oracle owns piece placement; the interpreter owns side-to-move and
passes it explicitly on every query.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pgncoord.core.enums import CastleSide, Color, PieceType
from pgncoord.core.types import Square


class IPositionOracle(ABC):
    """Board state holder answering occupancy and legality queries."""

    @abstractmethod
    def occupied(self, color: Color, piece_type: PieceType) -> frozenset[Square]:
        """Squares holding a *piece_type* of *color*."""

    @abstractmethod
    def is_legal(
        self,
        origin: Square,
        destination: Square,
        color: Color,
        promotion: PieceType | None = None,
    ) -> bool:
        """Is moving *origin* → *destination* legal for *color* to play?"""

    @abstractmethod
    def apply(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> None:
        """Play a confirmed move.

        Raises:
            IllegalTransitionError: if the oracle rejects the move.
        """

    @abstractmethod
    def apply_castle(self, side: CastleSide, color: Color) -> None:
        """Castle *side* for *color*.

        Raises:
            IllegalTransitionError: if king or rook is off its home square.
        """

    @abstractmethod
    def reset(self, fen: str | None = None) -> None:
        """Return to the standard starting position, or to *fen*."""

    @abstractmethod
    def fen(self) -> str:
        """FEN of the current position."""
