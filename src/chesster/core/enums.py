"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

import chess


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn advance for this side."""
        return 1 if self is Color.WHITE else -1

    @property
    def back_rank(self) -> int:
        """Rank index (0–7) where this side's pawns promote."""
        return 7 if self is Color.WHITE else 0

    @property
    def home_rank(self) -> int:
        """Rank index (0–7) holding this side's king and rooks at the start."""
        return 0 if self is Color.WHITE else 7

    def to_chess(self) -> chess.Color:
        return chess.WHITE if self is Color.WHITE else chess.BLACK

    @classmethod
    def from_chess(cls, color: chess.Color) -> Color:
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value.

    Values match python-chess piece type constants, so conversion is a cast.
    """

    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING

    def to_chess(self) -> chess.PieceType:
        return chess.PieceType(self.value)

    def __str__(self) -> str:
        return self.name.lower()
