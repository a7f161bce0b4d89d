"""Piece registry — the presentation layer's record of what stands where."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesster.core.enums import Color, PieceType
from chesster.core.types import Square
from chesster.game.state import BoardSnapshot


class RegistryDesyncError(RuntimeError):
    """Registry contents no longer match the rules engine's board."""


@dataclass(slots=True)
class PieceRecord:
    """One physical piece, tracked from game start until it is captured.

    ``piece_type`` changes only on promotion; ``alive`` only ever goes
    from True to False.
    """

    id: int
    piece_type: PieceType
    color: Color
    square: Square
    alive: bool = True


class PieceRegistry:
    """Arena of :class:`PieceRecord` keyed by stable id.

    A square index over alive pieces answers occupancy queries; captured
    records stay in the arena so the presentation layer can tear them
    down at its own pace.
    """

    __slots__ = ("_pieces", "_by_square")

    def __init__(self) -> None:
        self._pieces: dict[int, PieceRecord] = {}
        self._by_square: dict[Square, int] = {}

    @classmethod
    def from_snapshot(cls, snapshot: BoardSnapshot) -> PieceRegistry:
        """Create one record per occupied square, ids assigned a1 → h8."""
        registry = cls()
        for square, (piece_type, color) in sorted(snapshot.occupied().items()):
            piece_id = len(registry._pieces)
            registry._pieces[piece_id] = PieceRecord(
                piece_id, piece_type, color, square
            )
            registry._by_square[square] = piece_id
        return registry

    # ── Queries ──────────────────────────────────────────────────────────

    def get(self, piece_id: int) -> PieceRecord:
        try:
            return self._pieces[piece_id]
        except KeyError:
            raise KeyError(f"Unknown piece id: {piece_id}") from None

    def at(self, square: Square) -> PieceRecord | None:
        """Alive piece standing on *square*, if any."""
        piece_id = self._by_square.get(square)
        return None if piece_id is None else self._pieces[piece_id]

    def alive(self) -> Iterator[PieceRecord]:
        return (p for p in self._pieces.values() if p.alive)

    def captured(self) -> Iterator[PieceRecord]:
        return (p for p in self._pieces.values() if not p.alive)

    @property
    def alive_count(self) -> int:
        return len(self._by_square)

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[PieceRecord]:
        return iter(self._pieces.values())

    # ── Mutation ─────────────────────────────────────────────────────────

    def relocate(self, piece_id: int, square: Square) -> None:
        piece = self.get(piece_id)
        if not piece.alive:
            raise RegistryDesyncError(f"Cannot move captured piece {piece_id}")
        occupant = self._by_square.get(square)
        if occupant is not None and occupant != piece_id:
            raise RegistryDesyncError(
                f"{square} is occupied by piece {occupant}; capture it first"
            )
        del self._by_square[piece.square]
        piece.square = square
        self._by_square[square] = piece_id

    def capture(self, piece_id: int) -> None:
        piece = self.get(piece_id)
        if not piece.alive:
            return
        piece.alive = False
        del self._by_square[piece.square]

    def promote(self, piece_id: int, piece_type: PieceType) -> None:
        self.get(piece_id).piece_type = piece_type

    # ── Consistency ──────────────────────────────────────────────────────

    def verify_against(self, snapshot: BoardSnapshot) -> None:
        """Raise :class:`RegistryDesyncError` if occupancy differs from *snapshot*."""
        expected = snapshot.occupied()
        actual = {
            sq: (self._pieces[i].piece_type, self._pieces[i].color)
            for sq, i in self._by_square.items()
        }
        if expected != actual:
            missing = sorted(set(expected.items()) - set(actual.items()))
            extra = sorted(set(actual.items()) - set(expected.items()))
            raise RegistryDesyncError(
                f"Registry out of sync with board {snapshot.fen}: "
                f"missing={_describe(missing)}, extra={_describe(extra)}"
            )


def _describe(entries: list[tuple[Square, tuple[PieceType, Color]]]) -> list[str]:
    return [
        f"{color!s} {piece_type!s}@{square}"
        for square, (piece_type, color) in entries
    ]
