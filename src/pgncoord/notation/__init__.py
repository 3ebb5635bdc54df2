"""Notation package: SAN classification/resolution and PGN preprocessing."""

from pgncoord.notation.fen import fen_side_to_move
from pgncoord.notation.models import ParsedPgn
from pgncoord.notation.pgn import movetext_tokens, parse_pgn_game, split_games
from pgncoord.notation.resolver import resolve, resolve_castle, resolve_move
from pgncoord.notation.tokens import ParsedToken, classify, clean_token

__all__ = [
    "ParsedPgn",
    "ParsedToken",
    "classify",
    "clean_token",
    "fen_side_to_move",
    "movetext_tokens",
    "parse_pgn_game",
    "resolve",
    "resolve_castle",
    "resolve_move",
    "split_games",
]
