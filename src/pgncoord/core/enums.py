"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleSide(StrEnum):
    """Castling direction, valued by its SAN literal."""

    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"

    @property
    def king_file_to(self) -> int:
        """File the king lands on (g or c)."""
        return 6 if self is CastleSide.KINGSIDE else 2

    @property
    def rook_file_from(self) -> int:
        """File the rook starts on (h or a)."""
        return 7 if self is CastleSide.KINGSIDE else 0
