"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from pgncoord.core.enums import CastleSide, Color, PieceType
from pgncoord.core.errors import IllegalTransitionError
from pgncoord.core.types import Square
from pgncoord.oracle.board_oracle import BoardOracle
from pgncoord.oracle.interfaces import IPositionOracle


class FakeOracle(IPositionOracle):
    """Scripted oracle: fixed occupancy and a fixed set of legal moves."""

    def __init__(
        self,
        pieces: dict[tuple[Color, PieceType], Iterable[Square]] | None = None,
        legal: Iterable[tuple[Square, Square]] = (),
        refuse_apply: bool = False,
    ) -> None:
        self.pieces = {key: frozenset(sqs) for key, sqs in (pieces or {}).items()}
        self.legal = set(legal)
        self.refuse_apply = refuse_apply
        self.applied: list[tuple[Square, Square, PieceType | None]] = []
        self.castles: list[tuple[CastleSide, Color]] = []
        self.legality_queries: list[tuple[Square, Square, Color]] = []
        self.resets: list[str | None] = []

    def occupied(self, color: Color, piece_type: PieceType) -> frozenset[Square]:
        return self.pieces.get((color, piece_type), frozenset())

    def is_legal(
        self,
        origin: Square,
        destination: Square,
        color: Color,
        promotion: PieceType | None = None,
    ) -> bool:
        self.legality_queries.append((origin, destination, color))
        return (origin, destination) in self.legal

    def apply(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> None:
        if self.refuse_apply:
            raise IllegalTransitionError(f"refused {origin}->{destination}")
        self.applied.append((origin, destination, promotion))

    def apply_castle(self, side: CastleSide, color: Color) -> None:
        self.castles.append((side, color))

    def reset(self, fen: str | None = None) -> None:
        self.resets.append(fen)

    def fen(self) -> str:
        return "fake"


@pytest.fixture
def oracle() -> BoardOracle:
    """Fresh python-chess backed oracle at the starting position."""
    return BoardOracle()


@pytest.fixture
def fake_oracle_factory() -> type[FakeOracle]:
    return FakeOracle
