"""Position oracle backed by :mod:`chess` (python-chess)."""

from __future__ import annotations

import logging

import chess

from pgncoord.core.enums import CastleSide, Color, PieceType
from pgncoord.core.errors import IllegalTransitionError, OracleDesyncError
from pgncoord.core.move import castle_squares
from pgncoord.core.types import Square, make_square, rank_of, square_name
from pgncoord.oracle.interfaces import IPositionOracle

_LOGGER = logging.getLogger(__name__)

# Square indices and piece-type values coincide with python-chess numbering.
_PIECE_TYPES: dict[PieceType, chess.PieceType] = {
    PieceType.PAWN: chess.PAWN,
    PieceType.KNIGHT: chess.KNIGHT,
    PieceType.BISHOP: chess.BISHOP,
    PieceType.ROOK: chess.ROOK,
    PieceType.QUEEN: chess.QUEEN,
    PieceType.KING: chess.KING,
}


def _to_chess_color(color: Color) -> chess.Color:
    return chess.WHITE if color == Color.WHITE else chess.BLACK


def _to_chess_move(
    origin: Square, destination: Square, promotion: PieceType | None
) -> chess.Move:
    promo = _PIECE_TYPES[promotion] if promotion is not None else None
    return chess.Move(origin, destination, promotion=promo)


class BoardOracle(IPositionOracle):
    """Wraps a private :class:`chess.Board`.

    Each oracle owns its board; nothing is shared between instances.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen or chess.STARTING_FEN)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def turn(self) -> Color:
        return Color.WHITE if self._board.turn == chess.WHITE else Color.BLACK

    def occupied(self, color: Color, piece_type: PieceType) -> frozenset[Square]:
        squares = self._board.pieces(_PIECE_TYPES[piece_type], _to_chess_color(color))
        return frozenset(squares)

    def is_legal(
        self,
        origin: Square,
        destination: Square,
        color: Color,
        promotion: PieceType | None = None,
    ) -> bool:
        self._check_turn(color)
        return self._board.is_legal(_to_chess_move(origin, destination, promotion))

    def fen(self) -> str:
        return self._board.fen()

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> None:
        move = _to_chess_move(origin, destination, promotion)
        if not self._board.is_legal(move):
            raise IllegalTransitionError(
                f"Oracle rejected {move.uci()} in position {self._board.fen()}"
            )
        self._board.push(move)

    def apply_castle(self, side: CastleSide, color: Color) -> None:
        self._check_turn(color)
        king_from, king_to = castle_squares(side, color)
        rook_from = make_square(side.rook_file_from, rank_of(king_from))
        board = self._board
        chess_color = _to_chess_color(color)
        if board.piece_at(king_from) != chess.Piece(chess.KING, chess_color):
            raise IllegalTransitionError(
                f"Cannot castle {side}: no {color} king on {square_name(king_from)}"
            )
        if board.piece_at(rook_from) != chess.Piece(chess.ROOK, chess_color):
            raise IllegalTransitionError(
                f"Cannot castle {side}: no {color} rook on {square_name(rook_from)}"
            )

        move = chess.Move(king_from, king_to)
        if not board.is_legal(move):
            _LOGGER.warning(
                "Forcing %s for %s in position %s", side, color, board.fen()
            )
        # push() relocates king and rook without a legality check.
        board.push(move)

    def reset(self, fen: str | None = None) -> None:
        if fen is None:
            self._board.reset()
        else:
            self._board.set_fen(fen)

    # ── Internals ────────────────────────────────────────────────────────

    def _check_turn(self, color: Color) -> None:
        if self.turn != color:
            raise OracleDesyncError(
                f"Queried for {color} but the oracle has {self.turn} to move"
            )
