"""GameEndDetector — ends the game when a king is captured."""

from __future__ import annotations

from collections.abc import Iterable

from chesster.core.enums import PieceType
from chesster.game.effects import Captured, Effect, GameEnded
from chesster.game.registry import PieceRegistry


class GameEndDetector:
    """Stateless observer of resolver effects.

    Checkmate, stalemate and draws are not detected here; python-chess
    simply stops accepting moves in those positions.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: PieceRegistry) -> None:
        self._registry = registry

    def inspect(self, effects: Iterable[Effect]) -> GameEnded | None:
        for effect in effects:
            if not isinstance(effect, Captured):
                continue
            piece = self._registry.get(effect.piece_id)
            if piece.piece_type == PieceType.KING:
                return GameEnded(winner=piece.color.opposite)
        return None
