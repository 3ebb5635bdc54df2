"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ParsedPgn:
    """One PGN game split into headers, mainline SAN tokens and result."""

    headers: dict[str, str]
    moves: list[str]
    result_token: str

    @property
    def start_fen(self) -> str | None:
        """Custom starting position from the ``SetUp``/``FEN`` tag pair."""
        fen = self.headers.get("FEN")
        if fen and self.headers.get("SetUp", "1") == "1":
            return fen
        return None
