"""Game layer — session, selection, move resolution, piece registry.

Quick start::

    from chesster.core import Square
    from chesster.game import GameSession

    session = GameSession()
    session.click(Square.parse("e2"))
    effects = session.click(Square.parse("e4"))
"""

from chesster.game.controller import GameEvents, GameSession
from chesster.game.effects import (
    Captured,
    Effect,
    GameEnded,
    Moved,
    MoveOutcome,
    Promoted,
)
from chesster.game.end_detector import GameEndDetector
from chesster.game.interfaces import GamePhase, IGameSession
from chesster.game.registry import PieceRecord, PieceRegistry, RegistryDesyncError
from chesster.game.resolver import MoveResolver
from chesster.game.selection import Selection, SelectionController, SelectionPhase
from chesster.game.state import BoardSnapshot, GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameSession",
    # Effects
    "Captured",
    "Effect",
    "GameEnded",
    "MoveOutcome",
    "Moved",
    "Promoted",
    # Concrete
    "BoardSnapshot",
    "GameEndDetector",
    "GameEvents",
    "GameSession",
    "GameState",
    "MoveRecord",
    "MoveResolver",
    "PieceRecord",
    "PieceRegistry",
    "RegistryDesyncError",
    "Selection",
    "SelectionController",
    "SelectionPhase",
]
