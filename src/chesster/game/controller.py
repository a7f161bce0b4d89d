"""GameSession — the per-click orchestrator.

Owns the game context (state, registry, selection, resolver, end detector)
and runs each click through a fixed pipeline.  Emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesster.config import SessionSettings
from chesster.core.enums import Color
from chesster.core.types import Square
from chesster.game.effects import Effect, GameEnded
from chesster.game.end_detector import GameEndDetector
from chesster.game.interfaces import GamePhase, IGameSession
from chesster.game.registry import PieceRegistry
from chesster.game.resolver import MoveResolver
from chesster.game.selection import Selection, SelectionController
from chesster.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

EffectsCallback = Callable[[list[Effect]], None]
SelectionCallback = Callable[[Selection], None]
GameOverCallback = Callable[[Color], None]  # winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_effects: list[EffectsCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Runs a two-player game driven by resolved square clicks.

    Per click: selection update → move attempt (if a piece is held and a
    new square was clicked) → registry effects → end check → selection
    reset.  After a king is captured the session is over for good and
    ignores further clicks.

    Thread-safety: single-threaded; call from the main/UI thread only.
    """

    __slots__ = (
        "_settings",
        "_state",
        "_registry",
        "_resolver",
        "_selection",
        "_end_detector",
        "_phase",
        "_winner",
        "events",
    )

    def __init__(self, settings: SessionSettings | None = None) -> None:
        self._settings = settings or SessionSettings()
        self._state = GameState(self._settings.start_fen)
        self._registry = PieceRegistry.from_snapshot(self._state.snapshot())
        self._resolver = MoveResolver(
            self._state,
            self._registry,
            verify=self._settings.verify_registry,
        )
        self._selection = SelectionController(
            self._state, self._registry, self._resolver
        )
        self._end_detector = GameEndDetector(self._registry)
        self._phase = GamePhase.AWAITING_MOVE
        self._winner: Color | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def registry(self) -> PieceRegistry:
        return self._registry

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selection(self) -> Selection:
        return self._selection.selection

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── IGameSession impl ────────────────────────────────────────────────

    def click(self, square: Square | None) -> list[Effect]:
        if self.is_game_over:
            _LOGGER.debug("Game is over, ignoring click on %s", square)
            return []

        before = self._selection.selection
        outcome = self._selection.on_square_clicked(square)
        effects = [] if outcome is None else list(outcome.effects)

        ended = self._end_detector.inspect(effects)
        if ended is not None:
            effects.append(ended)

        if effects:
            self._emit_effects(effects)
        if self._selection.selection != before:
            self._emit_selection(self._selection.selection)
        if ended is not None:
            self._finish(ended)
        return effects

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, ended: GameEnded) -> None:
        self._phase = GamePhase.GAME_OVER
        self._winner = ended.winner
        _LOGGER.info("%s won! Thanks for playing!", ended.winner.name.capitalize())
        for cb in self.events.on_game_over:
            cb(ended.winner)

    def _emit_effects(self, effects: list[Effect]) -> None:
        for cb in self.events.on_effects:
            cb(list(effects))

    def _emit_selection(self, selection: Selection) -> None:
        for cb in self.events.on_selection_changed:
            cb(selection)
