"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the presentation side talks to
``IGameSession`` and never reaches into the registry or board directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesster.core.enums import Color
    from chesster.core.types import Square
    from chesster.game.effects import Effect
    from chesster.game.selection import Selection


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()  # terminal, never left


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameSession(ABC):
    """Interface for the click-driven game orchestrator."""

    @property
    @abstractmethod
    def phase(self) -> GamePhase: ...

    @property
    @abstractmethod
    def selection(self) -> Selection: ...

    @property
    @abstractmethod
    def winner(self) -> Color | None: ...

    @abstractmethod
    def click(self, square: Square | None) -> list[Effect]:
        """Process one resolved click (None = off the board).

        Returns the effects produced by this click, in application order.
        """
