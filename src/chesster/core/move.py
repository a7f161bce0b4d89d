"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chesster.core.enums import PieceType
from chesster.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single candidate move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def to_chess(self) -> chess.Move:
        return chess.Move(
            self.from_sq.index,
            self.to_sq.index,
            promotion=None if self.promotion is None else self.promotion.to_chess(),
        )

    @property
    def file_distance(self) -> int:
        """Horizontal displacement, signed (negative = toward the a-file)."""
        return self.to_sq.file - self.from_sq.file

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.to_chess().uci()

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
