"""SelectionController — click-driven square/piece selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, auto

from chesster.core.types import Square
from chesster.game.effects import MoveOutcome
from chesster.game.registry import PieceRegistry
from chesster.game.resolver import MoveResolver
from chesster.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class SelectionPhase(IntEnum):
    """Finite-state-machine states for the click selection."""

    IDLE = auto()
    SQUARE_SELECTED = auto()
    PIECE_SELECTED = auto()


@dataclass(frozen=True, slots=True)
class Selection:
    """Current selection; ``piece`` is only set together with its square."""

    square: Square | None = None
    piece: int | None = None

    @property
    def phase(self) -> SelectionPhase:
        if self.piece is not None:
            return SelectionPhase.PIECE_SELECTED
        if self.square is not None:
            return SelectionPhase.SQUARE_SELECTED
        return SelectionPhase.IDLE


_IDLE = Selection()


class SelectionController:
    """Converts resolved square clicks into selections and move attempts.

    Only pieces of the side to move can be picked up.  Once a piece is
    held, any other square is tried as its destination and the selection
    is cleared afterwards, whether or not the move was legal.
    """

    __slots__ = ("_state", "_registry", "_resolver", "_selection")

    def __init__(
        self,
        state: GameState,
        registry: PieceRegistry,
        resolver: MoveResolver,
    ) -> None:
        self._state = state
        self._registry = registry
        self._resolver = resolver
        self._selection = _IDLE

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def phase(self) -> SelectionPhase:
        return self._selection.phase

    def reset(self) -> None:
        self._selection = _IDLE

    def on_square_clicked(self, square: Square | None) -> MoveOutcome | None:
        """Handle one click; *square* is None when the click missed the board.

        Returns the move outcome when the click completed a move attempt.
        """
        if square is None:
            self.reset()
            _LOGGER.debug("Clicked off board, selection cleared")
            return None

        current = self._selection
        if current.piece is None:
            self._select(square)
            return None

        if square == current.square:
            return None

        try:
            return self._resolver.attempt_move(current.piece, square)
        finally:
            self.reset()

    def _select(self, square: Square) -> None:
        piece = self._registry.at(square)
        if piece is not None and piece.color == self._state.side_to_move:
            self._selection = Selection(square, piece.id)
            _LOGGER.debug("Selected %s %s on %s", piece.color, piece.piece_type, square)
        else:
            self._selection = Selection(square)
