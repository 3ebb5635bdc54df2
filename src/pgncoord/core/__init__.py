"""Core domain layer: colors, piece types, squares and resolved moves."""

from pgncoord.core.enums import CastleSide, Color, PieceType
from pgncoord.core.errors import (
    AmbiguousMove,
    GameAborted,
    IllegalTransitionError,
    MalformedToken,
    OracleDesyncError,
    OracleError,
    SanError,
    UnresolvedMove,
)
from pgncoord.core.move import ResolvedMove, castle_squares
from pgncoord.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "ResolvedMove",
    "castle_squares",
    # Errors
    "AmbiguousMove",
    "GameAborted",
    "IllegalTransitionError",
    "MalformedToken",
    "OracleDesyncError",
    "OracleError",
    "SanError",
    "UnresolvedMove",
]
