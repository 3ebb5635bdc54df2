"""pgncoord: convert SAN movetext into origin/destination coordinates.

Quick start::

    from pgncoord import MoveInterpreter

    interpreter = MoveInterpreter()
    moves = interpreter.process("1. e4 e5 2. Nf3 Nc6")
    print(" ".join(str(m) for m in moves))  # e2e4 e7e5 g1f3 b8c6
"""

from pgncoord.config import InterpreterOptions
from pgncoord.core import (
    AmbiguousMove,
    CastleSide,
    Color,
    GameAborted,
    MalformedToken,
    PieceType,
    ResolvedMove,
    SanError,
    UnresolvedMove,
)
from pgncoord.game import (
    ConvertedGame,
    MoveInterpreter,
    TokenFailure,
    convert_game,
    convert_pgn,
)
from pgncoord.oracle import BoardOracle, IPositionOracle

__all__ = [
    "AmbiguousMove",
    "BoardOracle",
    "CastleSide",
    "Color",
    "ConvertedGame",
    "GameAborted",
    "IPositionOracle",
    "InterpreterOptions",
    "MalformedToken",
    "MoveInterpreter",
    "PieceType",
    "ResolvedMove",
    "SanError",
    "TokenFailure",
    "UnresolvedMove",
    "convert_game",
    "convert_pgn",
]
