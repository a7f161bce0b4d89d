"""Tests for PieceRegistry."""

import pytest

from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.types import A1, E1, E2, E4, E8, H8, Square
from chesster.game.registry import PieceRegistry, RegistryDesyncError
from chesster.game.state import GameState


def _initial_registry() -> PieceRegistry:
    return PieceRegistry.from_snapshot(GameState().snapshot())


class TestFromSnapshot:
    def test_thirty_two_pieces(self) -> None:
        registry = _initial_registry()
        assert len(registry) == 32
        assert registry.alive_count == 32

    def test_ids_follow_square_order(self) -> None:
        registry = _initial_registry()
        assert registry.at(A1).id == 0
        assert registry.at(E2).id == 12
        assert registry.at(H8).id == 31

    def test_records_match_board(self) -> None:
        registry = _initial_registry()
        king = registry.at(E8)
        assert king is not None
        assert king.piece_type == PieceType.KING
        assert king.color == Color.BLACK
        assert king.alive

    def test_empty_square(self) -> None:
        assert _initial_registry().at(E4) is None

    def test_custom_position(self) -> None:
        state = GameState("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        registry = PieceRegistry.from_snapshot(state.snapshot())
        assert len(registry) == 2


class TestMutation:
    def test_relocate(self) -> None:
        registry = _initial_registry()
        pawn = registry.at(E2)
        registry.relocate(pawn.id, E4)
        assert registry.at(E4) is pawn
        assert registry.at(E2) is None
        assert pawn.square == E4

    def test_relocate_onto_occupied_square_fails(self) -> None:
        registry = _initial_registry()
        with pytest.raises(RegistryDesyncError):
            registry.relocate(registry.at(E1).id, E2)

    def test_capture_keeps_record(self) -> None:
        registry = _initial_registry()
        pawn = registry.at(E2)
        registry.capture(pawn.id)
        assert not pawn.alive
        assert registry.at(E2) is None
        assert registry.get(pawn.id) is pawn
        assert list(registry.captured()) == [pawn]
        assert pawn not in list(registry.alive())
        assert registry.alive_count == 31
        assert len(registry) == 32

    def test_captured_piece_cannot_move(self) -> None:
        registry = _initial_registry()
        pawn = registry.at(E2)
        registry.capture(pawn.id)
        with pytest.raises(RegistryDesyncError):
            registry.relocate(pawn.id, E4)

    def test_promote_keeps_identity(self) -> None:
        registry = _initial_registry()
        pawn = registry.at(E2)
        registry.promote(pawn.id, PieceType.QUEEN)
        assert registry.get(pawn.id).piece_type == PieceType.QUEEN
        assert registry.at(E2) is pawn

    def test_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            _initial_registry().get(99)


class TestVerify:
    def test_in_sync_after_mirrored_move(self) -> None:
        state = GameState()
        registry = PieceRegistry.from_snapshot(state.snapshot())
        after = state.submit_move(Move(E2, E4))
        registry.relocate(registry.at(E2).id, E4)
        registry.verify_against(after)

    def test_desync_detected(self) -> None:
        state = GameState()
        registry = PieceRegistry.from_snapshot(state.snapshot())
        after = state.submit_move(Move(E2, E4))
        with pytest.raises(RegistryDesyncError, match="e4"):
            registry.verify_against(after)

    def test_desync_message_names_squares(self) -> None:
        state = GameState()
        registry = PieceRegistry.from_snapshot(state.snapshot())
        after = state.submit_move(Move(E2, E4))
        with pytest.raises(RegistryDesyncError) as excinfo:
            registry.verify_against(after)
        message = str(excinfo.value)
        assert "missing=['white pawn@e4']" in message
        assert "extra=['white pawn@e2']" in message

    def test_wrong_type_detected(self) -> None:
        state = GameState()
        registry = PieceRegistry.from_snapshot(state.snapshot())
        registry.promote(registry.at(Square.parse("d2")).id, PieceType.QUEEN)
        with pytest.raises(RegistryDesyncError):
            registry.verify_against(state.snapshot())
