"""Effect notifications produced for the presentation collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesster.core.enums import Color, PieceType
from chesster.core.types import Square


@dataclass(frozen=True, slots=True)
class Moved:
    piece_id: int
    to: Square


@dataclass(frozen=True, slots=True)
class Captured:
    piece_id: int


@dataclass(frozen=True, slots=True)
class Promoted:
    piece_id: int
    new_type: PieceType


@dataclass(frozen=True, slots=True)
class GameEnded:
    winner: Color


Effect: TypeAlias = Moved | Captured | Promoted | GameEnded


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of one move attempt.

    ``effects`` lists every registry mutation in the order it was applied;
    it is empty when the move was rejected.
    """

    accepted: bool
    effects: tuple[Effect, ...] = ()

    @classmethod
    def rejected(cls) -> MoveOutcome:
        return cls(False)
