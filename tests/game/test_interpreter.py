"""Tests for MoveInterpreter."""

import chess
import pytest

from pgncoord.config import InterpreterOptions
from pgncoord.core.enums import CastleSide, Color, PieceType
from pgncoord.core.errors import (
    AmbiguousMove,
    GameAborted,
    IllegalTransitionError,
    MalformedToken,
    OracleDesyncError,
    UnresolvedMove,
)
from pgncoord.core.move import ResolvedMove
from pgncoord.core.types import B1, E2, E4, F3
from pgncoord.game.interpreter import MoveInterpreter, TokenFailure
from pgncoord.oracle.board_oracle import BoardOracle

# Miniature where both players castle, ending in a rank-disambiguated capture.
LONG_GAME = """1. e4 e5 2. f4 d5 3. Nf3 Bg4 4. Be2 dxe4 5. Nxe5 Bxe2 6. Qxe2 Bd6 7. Qxe4 Nd7 8.
d4 Ngf6 9. Qe2 O-O 10. O-O Re8 11. Nc3 Qe7 12. Re1 Qe6 13. b3 Bb4 14. Bb2 Nd5
15. Qh5 Nxc3 16. f5 Qf6 17. Bc1 Nd5 18. Bg5 Qxf5 19. Rf1 Qe6 20. Ng4 g6 21. Nh6+
Kg7 22. Bf6+ N5xf6 23. Qg5 Nh5 24. Rxf7+ 1-0"""

LONG_GAME_MOVES = (
    "e2e4 e7e5 f2f4 d7d5 g1f3 c8g4 f1e2 d5e4 f3e5 g4e2 d1e2 f8d6 e2e4 b8d7 "
    "d2d4 g8f6 e4e2 O-O O-O f8e8 b1c3 d8e7 f1e1 e7e6 b2b3 d6b4 c1b2 f6d5 "
    "e2h5 d5c3 f4f5 e6f6 b2c1 c3d5 c1g5 f6f5 e1f1 f5e6 e5g4 g7g6 g4h6 g8g7 "
    "g5f6 d5f6 h5g5 f6h5 f1f7"
).split()


def _rendered(outcomes: list) -> list[str]:
    return [str(outcome) for outcome in outcomes]


class TestProcess:
    def test_opening(self) -> None:
        interpreter = MoveInterpreter()
        outcomes = interpreter.process("1. e4 e5 2. Nf3 Nc6")
        assert _rendered(outcomes) == ["e2e4", "e7e5", "g1f3", "b8c6"]
        assert all(isinstance(o, ResolvedMove) for o in outcomes)
        assert interpreter.side_to_move == Color.WHITE
        assert interpreter.ply == 4

    def test_long_game(self) -> None:
        outcomes = MoveInterpreter().process(LONG_GAME)
        assert _rendered(outcomes) == LONG_GAME_MOVES

    def test_first_move_castle_passes_through(self) -> None:
        interpreter = MoveInterpreter()
        outcomes = interpreter.process("1. O-O")
        assert _rendered(outcomes) == ["O-O"]
        assert outcomes[0].castle == CastleSide.KINGSIDE
        assert interpreter.side_to_move == Color.BLACK

    def test_castle_renders_as_written(self) -> None:
        outcomes = MoveInterpreter().process("1. 0-0 0-0-0")
        assert _rendered(outcomes) == ["0-0", "0-0-0"]
        assert outcomes[1].uci == "e8c8"

    def test_verified_castle_rejects_blocked_first_move(self) -> None:
        interpreter = MoveInterpreter(options=InterpreterOptions(verify_castling=True))
        outcomes = interpreter.process("1. O-O")
        assert isinstance(outcomes[0], TokenFailure)
        assert isinstance(outcomes[0].error, UnresolvedMove)
        assert interpreter.side_to_move == Color.WHITE

    def test_castle_moves_king_and_rook(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.process("1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O Nf6")
        board = chess.Board(interpreter.oracle.fen())
        assert board.piece_at(chess.G1) == chess.Piece(chess.KING, chess.WHITE)
        assert board.piece_at(chess.F1) == chess.Piece(chess.ROOK, chess.WHITE)

    def test_promotion(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.reset("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        outcomes = interpreter.process("1. a8=Q+ Kd7")
        assert _rendered(outcomes) == ["a7a8q", "e8d7"]
        assert outcomes[0].promotion == PieceType.QUEEN

    def test_check_marks_are_ignored(self) -> None:
        interpreter = MoveInterpreter()
        outcomes = interpreter.process("1. e4 f5 2. Qh5+ g6")
        assert _rendered(outcomes) == ["e2e4", "f7f5", "d1h5", "g7g6"]


class TestFailures:
    def test_failed_token_does_not_advance(self) -> None:
        interpreter = MoveInterpreter()
        outcomes = interpreter.process_tokens(["e4", "Qh5", "e5"])
        assert isinstance(outcomes[1], TokenFailure)
        assert isinstance(outcomes[1].error, UnresolvedMove)
        assert outcomes[1].color == Color.BLACK
        assert outcomes[1].ply == 1
        assert str(outcomes[2]) == "e7e5"
        assert interpreter.side_to_move == Color.WHITE
        assert interpreter.ply == 2

    def test_failed_token_leaves_board_untouched(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.process("1. e4")
        before = interpreter.oracle.fen()
        interpreter.process_tokens(["Zz9"])
        assert interpreter.oracle.fen() == before

    def test_short_token_is_malformed(self) -> None:
        outcomes = MoveInterpreter().process_tokens(["Nf"])
        assert isinstance(outcomes[0], TokenFailure)
        assert isinstance(outcomes[0].error, MalformedToken)
        assert str(outcomes[0]) == "?Nf"

    def test_ambiguous_reports_both_origins(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.reset("4k3/8/8/8/8/5N2/8/1N5K w - - 0 1")
        outcomes = interpreter.process("1. Nd2")
        error = outcomes[0].error
        assert isinstance(error, AmbiguousMove)
        assert error.candidates == (B1, F3)

    def test_pin_resolves_to_free_knight(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.reset("4k3/8/8/3b4/8/5N2/8/1N5K w - - 0 1")
        assert _rendered(interpreter.process("1. Nd2")) == ["b1d2"]

    def test_process_token_raises(self) -> None:
        with pytest.raises(MalformedToken):
            MoveInterpreter().process_token("Xe4")


class TestAborts:
    def test_oracle_refusal_aborts(self, fake_oracle_factory) -> None:
        oracle = fake_oracle_factory(
            pieces={(Color.WHITE, PieceType.PAWN): {E2}},
            legal={(E2, E4)},
            refuse_apply=True,
        )
        interpreter = MoveInterpreter(oracle)
        with pytest.raises(GameAborted) as info:
            interpreter.process("1. Nf3 e4 e5")
        assert info.value.token == "e4"
        assert len(info.value.outcomes) == 1
        assert isinstance(info.value.outcomes[0], TokenFailure)
        assert isinstance(info.value.__cause__, IllegalTransitionError)
        assert interpreter.side_to_move == Color.WHITE

    def test_desync_aborts(self) -> None:
        interpreter = MoveInterpreter()
        # Mutating the oracle behind the interpreter's back breaks the turn invariant.
        interpreter.oracle.apply(E2, E4)
        with pytest.raises(GameAborted) as info:
            interpreter.process("1. d4")
        assert isinstance(info.value.__cause__, OracleDesyncError)


class TestReset:
    def test_reset_is_idempotent(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.reset()
        first = _rendered(interpreter.process(LONG_GAME))
        interpreter.reset()
        second = _rendered(interpreter.process(LONG_GAME))
        assert first == second == LONG_GAME_MOVES

    def test_reset_restores_start(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.process("1. e4 e5 2. Nf3")
        interpreter.reset()
        assert interpreter.side_to_move == Color.WHITE
        assert interpreter.ply == 0
        assert interpreter.oracle.fen() == chess.STARTING_FEN

    def test_reset_to_fen_takes_its_side(self) -> None:
        interpreter = MoveInterpreter()
        interpreter.reset("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert interpreter.side_to_move == Color.BLACK
        assert _rendered(interpreter.process("1... Kd7")) == ["e8d7"]

    def test_constructor_start_fen(self) -> None:
        interpreter = MoveInterpreter(start_fen="4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert interpreter.side_to_move == Color.BLACK
        outcomes = interpreter.process("1... Kd7 2. Kd2")
        assert _rendered(outcomes) == ["e8d7", "e1d2"]

    def test_constructor_start_fen_with_oracle(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1"
        interpreter = MoveInterpreter(BoardOracle(fen), start_fen=fen)
        outcomes = interpreter.process("1... O-O-O 2. O-O")
        assert _rendered(outcomes) == ["O-O-O", "O-O"]
        assert interpreter.oracle.fen().startswith("2kr3r/8/8/8/8/8/8/R4RK1 b")

    def test_reset_forwards_to_oracle(self, fake_oracle_factory) -> None:
        oracle = fake_oracle_factory()
        interpreter = MoveInterpreter(oracle)
        interpreter.reset()
        interpreter.reset("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert oracle.resets == [None, "4k3/8/8/8/8/8/8/4K3 b - - 0 1"]


class TestRoundTrip:
    def test_matches_direct_application(self) -> None:
        interpreter = MoveInterpreter()
        outcomes = interpreter.process("1. e4 d5 2. exd5 Qxd5 3. Nc3 Qa5 4. d4 c6")
        direct = BoardOracle()
        for move in outcomes:
            direct.apply(move.from_sq, move.to_sq, move.promotion)
        assert interpreter.oracle.fen() == direct.fen()

    def test_matches_python_chess_san(self) -> None:
        interpreter = MoveInterpreter()
        outcomes = interpreter.process(LONG_GAME)
        board = chess.Board()
        for san in "e4 e5 f4 d5 Nf3 Bg4 Be2 dxe4".split():
            board.push_san(san)
        assert [o.uci for o in outcomes[:8]] == [m.uci() for m in board.move_stack]
