"""Minimal FEN field access; full parsing belongs to the oracle."""

from __future__ import annotations

from pgncoord.core.enums import Color


def fen_side_to_move(fen: str) -> Color:
    """Active color field of *fen*."""
    parts = fen.split()
    if len(parts) < 2:
        raise ValueError(f"Invalid FEN (missing side-to-move): {fen!r}")
    if parts[1] == "w":
        return Color.WHITE
    if parts[1] == "b":
        return Color.BLACK
    raise ValueError(f"Invalid FEN side-to-move: {parts[1]!r}")
