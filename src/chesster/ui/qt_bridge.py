"""Qt bridge between a GameSession and the presentation layer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesster.config import SessionSettings
from chesster.core.types import Square
from chesster.game.controller import GameSession
from chesster.game.effects import Captured, Effect, GameEnded, Moved, Promoted
from chesster.game.selection import Selection


class SessionBridge(QObject):
    """Forwards resolved clicks into a session and re-emits its effects.

    Signals:
        piece_moved(int, Square): A piece record now stands on a new square.
        piece_captured(int): A piece record was taken off the board.
        piece_promoted(int, PieceType): A piece record changed type.
        game_ended(Color): A king was captured; carries the winner.
        selection_changed(Selection): The click selection changed.
    """

    piece_moved = pyqtSignal(int, object)
    piece_captured = pyqtSignal(int)
    piece_promoted = pyqtSignal(int, object)
    game_ended = pyqtSignal(object)
    selection_changed = pyqtSignal(object)

    def __init__(
        self,
        session: GameSession | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session or GameSession(SessionSettings())
        self._session.events.on_effects.append(self._on_effects)
        self._session.events.on_selection_changed.append(self._on_selection)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot(object)
    def square_clicked(self, square: object) -> None:
        """Handle a click that resolved to *square*."""
        if not isinstance(square, Square):
            raise TypeError(f"Expected Square, got {type(square).__name__}")
        self._session.click(square)

    @pyqtSlot()
    def clicked_off_board(self) -> None:
        self._session.click(None)

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, Moved):
                self.piece_moved.emit(effect.piece_id, effect.to)
            elif isinstance(effect, Captured):
                self.piece_captured.emit(effect.piece_id)
            elif isinstance(effect, Promoted):
                self.piece_promoted.emit(effect.piece_id, effect.new_type)
            elif isinstance(effect, GameEnded):
                self.game_ended.emit(effect.winner)

    def _on_selection(self, selection: Selection) -> None:
        self.selection_changed.emit(selection)
