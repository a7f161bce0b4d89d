"""Square value type and coordinate helpers.

Coordinates are zero-based: rank 0 is the first rank (White's home rank),
file 0 is the a-file.  python-chess indexes squares Little-Endian
Rank-File (a1=0, h1=7, a8=56, h8=63); ``Square.index`` follows that mapping.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import chess

from chesster.core.enums import Color

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < 8 and 0 <= self.file < 8):
            raise ValueError(f"Square out of range: rank={self.rank}, file={self.file}")

    # ── Conversion ───────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(rank=3, file=4)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]), _FILES.index(name[0]))

    @classmethod
    def from_index(cls, index: chess.Square) -> Square:
        return cls(chess.square_rank(index), chess.square_file(index))

    @property
    def index(self) -> chess.Square:
        """python-chess square index (0–63)."""
        return chess.square(self.file, self.rank)

    @property
    def name(self) -> str:
        return _FILES[self.file] + _RANKS[self.rank]

    @property
    def is_light(self) -> bool:
        return (self.rank + self.file) % 2 == 1

    # ── Neighbours ───────────────────────────────────────────────────────

    def offset(self, d_rank: int, d_file: int) -> Square | None:
        """Square shifted by the given deltas, or None off the board."""
        rank, file = self.rank + d_rank, self.file + d_file
        if 0 <= rank < 8 and 0 <= file < 8:
            return Square(rank, file)
        return None

    def right(self) -> Square | None:
        """Neighbour toward the h-file."""
        return self.offset(0, 1)

    def left(self) -> Square | None:
        """Neighbour toward the a-file."""
        return self.offset(0, -1)

    def backward(self, color: Color) -> Square | None:
        """Neighbour one rank behind, seen from *color*'s side."""
        return self.offset(-color.forward, 0)

    def __str__(self) -> str:
        return self.name


def all_squares() -> Iterator[Square]:
    """All 64 squares, a1 first, h8 last."""
    for index in chess.SQUARES:
        yield Square.from_index(index)


def corner(color: Color, *, kingside: bool) -> Square:
    """Rook home corner on *color*'s home rank."""
    return Square(color.home_rank, 7 if kingside else 0)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, f) for f in range(8))
