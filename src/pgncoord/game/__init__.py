"""Game layer: move interpretation and whole-game conversion."""

from pgncoord.game.converter import (
    ConvertedGame,
    convert_game,
    convert_pgn,
    format_line,
    format_numbered,
    to_json,
)
from pgncoord.game.interpreter import MoveInterpreter, MoveOutcome, TokenFailure

__all__ = [
    "ConvertedGame",
    "MoveInterpreter",
    "MoveOutcome",
    "TokenFailure",
    "convert_game",
    "convert_pgn",
    "format_line",
    "format_numbered",
    "to_json",
]
