"""Whole-game conversion and output rendering."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from pgncoord.config import InterpreterOptions
from pgncoord.core.errors import GameAborted
from pgncoord.core.move import ResolvedMove
from pgncoord.game.interpreter import MoveInterpreter, MoveOutcome, TokenFailure
from pgncoord.notation.pgn import parse_pgn_game, split_games

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ConvertedGame:
    """Outcome of converting one PGN game."""

    headers: dict[str, str]
    outcomes: list[MoveOutcome] = field(default_factory=list)
    aborted: str | None = None
    result_token: str = "*"

    @property
    def moves(self) -> list[ResolvedMove]:
        return [o for o in self.outcomes if isinstance(o, ResolvedMove)]

    @property
    def failures(self) -> list[TokenFailure]:
        return [o for o in self.outcomes if isinstance(o, TokenFailure)]

    @property
    def ok(self) -> bool:
        """True when every token resolved and the game ran to the end."""
        return self.aborted is None and not self.failures


def convert_game(pgn_text: str, interpreter: MoveInterpreter) -> ConvertedGame:
    """Reset *interpreter* and convert one PGN game with it.

    A ``SetUp``/``FEN`` tag pair selects the starting position. An oracle
    invariant violation stops the game; outcomes up to that point are kept.
    """
    parsed = parse_pgn_game(pgn_text)
    game = ConvertedGame(headers=parsed.headers, result_token=parsed.result_token)
    interpreter.reset(parsed.start_fen)
    try:
        game.outcomes = interpreter.process_tokens(parsed.moves)
    except GameAborted as exc:
        _LOGGER.error("%s", exc)
        game.outcomes = exc.outcomes
        game.aborted = str(exc)
    return game


def convert_pgn(
    pgn_text: str, options: InterpreterOptions | None = None
) -> list[ConvertedGame]:
    """Convert every game in a PGN document, one interpreter reused."""
    interpreter = MoveInterpreter(options=options)
    games: list[ConvertedGame] = []
    for index, game_text in enumerate(split_games(pgn_text), start=1):
        try:
            games.append(convert_game(game_text, interpreter))
        except ValueError as exc:
            _LOGGER.error("Skipping game %d: %s", index, exc)
            games.append(ConvertedGame(headers={}, aborted=str(exc)))
    return games


# ── Rendering ────────────────────────────────────────────────────────────────


def format_line(moves: list[ResolvedMove]) -> str:
    """Space-joined coordinate moves, e.g. ``e2e4 e7e5``."""
    return " ".join(str(move) for move in moves)


def format_numbered(moves: list[ResolvedMove]) -> str:
    """One numbered line per full move, e.g. ``1. e2e4 e7e5``."""
    lines: list[str] = []
    for ply in range(0, len(moves), 2):
        pair = " ".join(str(move) for move in moves[ply : ply + 2])
        lines.append(f"{ply // 2 + 1}. {pair}")
    return "\n".join(lines)


def to_json(games: list[ConvertedGame]) -> str:
    """Machine-readable rendering of converted games."""
    payload = []
    for game in games:
        payload.append(
            {
                "headers": game.headers,
                "moves": [str(move) for move in game.moves],
                "failures": [
                    {
                        "token": failure.token,
                        "ply": failure.ply,
                        "color": str(failure.color),
                        "error": type(failure.error).__name__,
                        "message": str(failure.error),
                    }
                    for failure in game.failures
                ],
                "result": game.result_token,
                "aborted": game.aborted,
            }
        )
    return json.dumps(payload, indent=2)
