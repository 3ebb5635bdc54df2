"""Resolved move value object (coordinate representation)."""

from __future__ import annotations

from dataclasses import dataclass

from pgncoord.core.enums import CastleSide, Color, PieceType
from pgncoord.core.types import Square, make_square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

_KING_FILE = 4


def castle_squares(side: CastleSide, color: Color) -> tuple[Square, Square]:
    """King origin and destination for castling *side* as *color*."""
    rank = 0 if color == Color.WHITE else 7
    return make_square(_KING_FILE, rank), make_square(side.king_file_to, rank)


@dataclass(frozen=True, slots=True)
class ResolvedMove:
    """Immutable origin/destination pair produced from one SAN token."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    castle: CastleSide | None = None
    san: str = ""

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Coordinates, or for castles the token as written (``0-0`` stays)."""
        if self.castle is not None:
            return self.san or str(self.castle)
        return self.uci

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation (castles as king moves)."""
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
