"""PGN preprocessing: headers, comments, variations, move numbers, results."""

from __future__ import annotations

import logging
import re

from pgncoord.notation.models import ParsedPgn

_LOGGER = logging.getLogger(__name__)

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_INLINE_TAG_RE = re.compile(r'\[\w+\s+"(?:[^"\\]|\\.)*"\]')
_PGN_RESULT_TOKENS = {"1-0", "0-1", "1/2-1/2", "*"}
_MOVE_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?$")
_MOVE_NUMBER_PREFIX_RE = re.compile(r"^\d+\.+")


def _parse_pgn_movetext_mainline(movetext: str) -> tuple[list[str], str]:
    """Parse movetext and return mainline SAN tokens plus result token."""
    moves: list[str] = []
    result_token = "*"
    variation_depth = 0
    idx = 0
    total = len(movetext)

    while idx < total:
        ch = movetext[idx]

        if ch.isspace():
            idx += 1
            continue

        if ch == "{":
            end = movetext.find("}", idx + 1)
            idx = total if end < 0 else end + 1
            continue

        if ch == ";":
            end = movetext.find("\n", idx + 1)
            idx = total if end < 0 else end
            continue

        if ch == "(":
            variation_depth += 1
            idx += 1
            continue

        if ch == ")":
            variation_depth = max(0, variation_depth - 1)
            idx += 1
            continue

        token_end = idx
        while (
            token_end < total
            and not movetext[token_end].isspace()
            and movetext[token_end] not in "{}();"
        ):
            token_end += 1
        token = movetext[idx:token_end]
        idx = token_end

        if not token or variation_depth > 0:
            continue

        if token in _PGN_RESULT_TOKENS:
            result_token = token
            continue

        if _MOVE_NUMBER_RE.match(token):
            continue

        if token.startswith("$") and token[1:].isdigit():
            continue

        # "12.e4" and "12...e5" carry the move number glued to the move.
        token = _MOVE_NUMBER_PREFIX_RE.sub("", token).lstrip(".")
        if not token:
            continue

        # Dot-terminated words ("e.p.") are annotations, never moves.
        if token.endswith("."):
            continue

        moves.append(token)

    return moves, result_token


def movetext_tokens(text: str) -> list[str]:
    """Mainline SAN tokens of *text*.

    Tag pairs anywhere in the text (including on the same line as moves),
    comments, variations, NAGs, move numbers and result markers are removed.
    """
    moves, _result = _parse_pgn_movetext_mainline(_INLINE_TAG_RE.sub(" ", text))
    return moves


def parse_pgn_game(pgn_text: str) -> ParsedPgn:
    """Parse a single PGN game into structured headers/moves/result."""
    headers: dict[str, str] = {}
    move_lines: list[str] = []
    in_headers = True

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            if in_headers and not headers:
                continue
            in_headers = False
            continue

        if in_headers and line.startswith("["):
            match = _PGN_HEADER_RE.match(line)
            if match is None:
                _LOGGER.warning("Skipping unparseable PGN header line: %s", line)
                continue
            key, raw_value = match.groups()
            value = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            headers[key] = value
            continue

        in_headers = False
        if line.startswith("%"):
            continue
        move_lines.append(line)

    movetext = _INLINE_TAG_RE.sub(" ", "\n".join(move_lines))
    moves, result_token = _parse_pgn_movetext_mainline(movetext)
    header_result = headers.get("Result")
    if result_token == "*" and header_result in _PGN_RESULT_TOKENS:
        result_token = header_result

    return ParsedPgn(headers=headers, moves=moves, result_token=result_token)


def split_games(pgn_text: str) -> list[str]:
    """Split a multi-game PGN document into per-game texts.

    A bracketed line that follows movetext starts a new game, whether or
    not it parses as a tag pair. Text without any tag pairs is a single game.
    """
    games: list[list[str]] = []
    current: list[str] = []
    seen_movetext = False

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if line.startswith("[") and seen_movetext:
            games.append(current)
            current = []
            seen_movetext = False
        if line and not line.startswith("["):
            seen_movetext = True
        current.append(raw_line)

    games.append(current)
    return [
        "\n".join(lines) for lines in games if any(line.strip() for line in lines)
    ]
