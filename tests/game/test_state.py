"""Tests for GameState and BoardSnapshot."""

import chess

from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.types import D7, E2, E4, Square
from chesster.game.state import GameState


class TestGameStateSetup:
    def test_setup_default(self) -> None:
        gs = GameState()
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.start_fen == chess.STARTING_FEN

    def test_setup_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        gs = GameState(fen)
        assert gs.side_to_move == Color.BLACK
        assert gs.en_passant_target() == Square.parse("e3")

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.submit_move(Move(E2, E4))
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE
        assert gs.piece_at(E2) == (PieceType.PAWN, Color.WHITE)


class TestSubmitMove:
    def test_legal_move_returns_snapshot(self) -> None:
        gs = GameState()
        after = gs.submit_move(Move(E2, E4))
        assert after is not None
        assert after.side_to_move == Color.BLACK
        assert after.piece_at(E4) == (PieceType.PAWN, Color.WHITE)
        assert after.piece_at(E2) is None
        assert gs.side_to_move == Color.BLACK

    def test_illegal_move_leaves_board(self) -> None:
        gs = GameState()
        fen_before = gs.snapshot().fen
        assert gs.submit_move(Move(E2, Square.parse("e5"))) is None
        assert gs.snapshot().fen == fen_before
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0

    def test_moving_opponent_piece_rejected(self) -> None:
        gs = GameState()
        assert gs.submit_move(Move(D7, Square.parse("d5"))) is None

    def test_history_records_san(self) -> None:
        gs = GameState()
        gs.submit_move(Move(E2, E4))
        gs.submit_move(Move(Square.parse("d7"), Square.parse("d5")))
        gs.submit_move(Move(E4, Square.parse("d5")))
        assert [r.san for r in gs.move_history] == ["e4", "d5", "exd5"]
        assert gs.move_history[-1].was_capture
        assert not gs.move_history[0].was_capture
        assert gs.fullmove_number == 2

    def test_double_push_sets_en_passant_target(self) -> None:
        gs = GameState()
        gs.submit_move(Move(E2, E4))
        assert gs.en_passant_target() == Square.parse("e3")
        gs.submit_move(Move(Square.parse("g8"), Square.parse("f6")))
        assert gs.en_passant_target() is None


class TestSnapshot:
    def test_snapshot_is_frozen_in_time(self) -> None:
        gs = GameState()
        before = gs.snapshot()
        gs.submit_move(Move(E2, E4))
        assert before.piece_at(E2) == (PieceType.PAWN, Color.WHITE)
        assert before.piece_at(E4) is None
        assert before.side_to_move == Color.WHITE

    def test_occupied_counts_all_pieces(self) -> None:
        occupied = GameState().snapshot().occupied()
        assert len(occupied) == 32
        assert occupied[Square.parse("e8")] == (PieceType.KING, Color.BLACK)
