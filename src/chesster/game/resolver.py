"""MoveResolver — submits a selected move and applies its side effects."""

from __future__ import annotations

import logging

from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.types import Square, corner
from chesster.game.effects import Captured, Effect, Moved, MoveOutcome, Promoted
from chesster.game.registry import PieceRecord, PieceRegistry, RegistryDesyncError
from chesster.game.state import BoardSnapshot, GameState

_LOGGER = logging.getLogger(__name__)


class MoveResolver:
    """Turns ``(piece, target)`` into a rules-engine move and mirrors the result.

    python-chess only hands back the new board, so captures, the castling
    rook, en passant and promotion are all worked out here from the
    pre-move snapshot and the move's geometry.

    Args:
        state: Authoritative game state; the only thing that changes the board.
        registry: Piece records updated to match each accepted move.
        verify: Cross-check the registry against the new board after every
            accepted move.
    """

    __slots__ = ("_state", "_registry", "_verify")

    def __init__(
        self,
        state: GameState,
        registry: PieceRegistry,
        *,
        verify: bool = False,
    ) -> None:
        self._state = state
        self._registry = registry
        self._verify = verify

    def build_move(self, piece: PieceRecord, target: Square) -> Move:
        """Candidate move for *piece*; pawns reaching the back rank queen."""
        promotion = None
        if piece.piece_type == PieceType.PAWN and target.rank == piece.color.back_rank:
            promotion = PieceType.QUEEN
        return Move(piece.square, target, promotion)

    def attempt_move(self, piece_id: int, target: Square) -> MoveOutcome:
        piece = self._registry.get(piece_id)
        move = self.build_move(piece, target)

        # python-chess also reads king-onto-own-rook as castling; only the
        # two-file king step castles here, so own-occupied targets never move.
        blocker = self._registry.at(target)
        if blocker is not None and blocker.color == piece.color:
            _LOGGER.debug(
                "Rejected %s: %s is held by own piece %d", move, target, blocker.id
            )
            return MoveOutcome.rejected()

        before = self._state.snapshot()
        after = self._state.submit_move(move)
        if after is None:
            _LOGGER.debug(
                "Illegal move %s by %s %s", move, piece.color, piece.piece_type
            )
            return MoveOutcome.rejected()

        effects = self._apply(piece, move, before)
        if self._verify:
            self._registry.verify_against(after)

        _LOGGER.info(
            "%s %s %s (%d effect%s)",
            piece.color,
            piece.piece_type,
            move,
            len(effects),
            "" if len(effects) == 1 else "s",
        )
        return MoveOutcome(True, tuple(effects))

    # ── Effect derivation ────────────────────────────────────────────────

    def _apply(
        self, piece: PieceRecord, move: Move, before: BoardSnapshot
    ) -> list[Effect]:
        # All lookups happen before the first registry write, so a desync
        # leaves the registry as it was.
        victim = self._registry.at(move.to_sq)
        if victim is not None and victim.color == piece.color:
            raise RegistryDesyncError(
                f"{move.to_sq} is held by own piece {victim.id} of {piece.id}"
            )
        if (
            victim is None
            and piece.piece_type == PieceType.PAWN
            and before.piece_at(move.to_sq) is None
            and move.to_sq == before.en_passant_target()
        ):
            victim = self._en_passant_victim(move.to_sq, piece.color)

        castling = None
        if piece.piece_type == PieceType.KING and abs(move.file_distance) > 1:
            castling = self._castling_rook(piece.color, move)

        effects: list[Effect] = []
        if victim is not None:
            self._registry.capture(victim.id)
            effects.append(Captured(victim.id))

        self._registry.relocate(piece.id, move.to_sq)
        effects.append(Moved(piece.id, move.to_sq))

        if castling is not None:
            rook, rook_to = castling
            self._registry.relocate(rook.id, rook_to)
            effects.append(Moved(rook.id, rook_to))

        if move.promotion is not None:
            self._registry.promote(piece.id, move.promotion)
            effects.append(Promoted(piece.id, move.promotion))

        return effects

    def _en_passant_victim(self, to_sq: Square, mover: Color) -> PieceRecord:
        behind = to_sq.backward(mover)
        victim = None if behind is None else self._registry.at(behind)
        if (
            victim is None
            or victim.color == mover
            or victim.piece_type != PieceType.PAWN
        ):
            raise RegistryDesyncError(f"No pawn to capture en passant behind {to_sq}")
        return victim

    def _castling_rook(self, color: Color, move: Move) -> tuple[PieceRecord, Square]:
        # Rooks are looked up on their fixed home corner; a rook that left
        # its corner cannot be castled with, so it is never a candidate.
        kingside = move.file_distance > 0
        rook_from = corner(color, kingside=kingside)
        rook_to = move.to_sq.left() if kingside else move.to_sq.right()
        rook = self._registry.at(rook_from)
        if rook is None or rook_to is None or rook.piece_type != PieceType.ROOK:
            raise RegistryDesyncError(f"No rook on {rook_from} to castle with")
        if self._registry.at(rook_to) is not None:
            raise RegistryDesyncError(f"{rook_to} is occupied; cannot castle")
        return rook, rook_to
