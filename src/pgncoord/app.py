"""Command-line entry point: PGN in, coordinate moves out."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgncoord.config import InterpreterOptions
from pgncoord.game.converter import (
    ConvertedGame,
    convert_pgn,
    format_line,
    format_numbered,
    to_json,
)

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgncoord",
        description="Convert PGN/SAN movetext into origin-destination coordinates.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="PGN file to read (default: stdin)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="write the space-joined move list of each game to this file",
    )
    parser.add_argument(
        "--format",
        choices=("text", "line", "json"),
        default="text",
        help="stdout rendering: numbered pairs, one line per game, or JSON",
    )
    parser.add_argument(
        "--verify-castling",
        action="store_true",
        help="reject castles the position does not allow",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every resolved move",
    )
    return parser


def _decode(data: bytes, source: str) -> str:
    """UTF-8 first; PGN export format itself is Latin-1."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        _LOGGER.warning("%s is not UTF-8, reading it as Latin-1", source)
        return data.decode("latin-1")


def _read_input(source: str) -> str:
    if source == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin.read()
        return _decode(buffer.read(), "stdin")
    return _decode(Path(source).read_bytes(), source)


def _render(games: list[ConvertedGame], fmt: str) -> str:
    if fmt == "json":
        return to_json(games)
    if fmt == "line":
        return "\n".join(format_line(game.moves) for game in games)
    blocks = []
    for game in games:
        block = format_numbered(game.moves)
        blocks.append(f"Processed moves:\n{block}" if block else "Processed moves:")
    return "\n\n".join(blocks)


def main(argv: list[str] | None = None) -> int:
    """Run the converter; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        pgn_text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.input, exc)
        return 1

    options = InterpreterOptions(verify_castling=args.verify_castling)
    games = convert_pgn(pgn_text, options)
    print(_render(games, args.format))

    if args.output:
        output = Path(args.output)
        output.write_text(
            "".join(format_line(game.moves) + "\n" for game in games),
            encoding="utf-8",
        )
        print(f"Output written to {output}", file=sys.stderr)

    return 0 if all(game.ok for game in games) else 1


if __name__ == "__main__":
    sys.exit(main())
