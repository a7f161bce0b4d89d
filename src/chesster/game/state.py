"""Game state — wraps the python-chess board and its move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import chess

from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.types import Square

_LOGGER = logging.getLogger(__name__)


class BoardSnapshot:
    """Read-only view of the board at one point in time.

    Holds a private copy of the python-chess board, so later moves on the
    live game never leak into an earlier snapshot.
    """

    __slots__ = ("_board",)

    def __init__(self, board: chess.Board) -> None:
        self._board = board.copy(stack=False)

    @property
    def side_to_move(self) -> Color:
        return Color.from_chess(self._board.turn)

    def piece_at(self, square: Square) -> tuple[PieceType, Color] | None:
        piece = self._board.piece_at(square.index)
        if piece is None:
            return None
        return PieceType(piece.piece_type), Color.from_chess(piece.color)

    def en_passant_target(self) -> Square | None:
        """Square a pawn would land on to capture en passant, if any."""
        ep = self._board.ep_square
        return None if ep is None else Square.from_index(ep)

    def occupied(self) -> dict[Square, tuple[PieceType, Color]]:
        return {
            Square.from_index(index): (
                PieceType(piece.piece_type),
                Color.from_chess(piece.color),
            )
            for index, piece in self._board.piece_map().items()
        }

    @property
    def fen(self) -> str:
        return self._board.fen()

    def __repr__(self) -> str:
        return f"BoardSnapshot({self.fen!r})"


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    san: str
    fen_after: str
    was_capture: bool = False


@dataclass
class GameState:
    """Owns the authoritative board.

    The board is only ever changed through :meth:`submit_move`, which lets
    python-chess decide legality.
    """

    start_fen: str = chess.STARTING_FEN
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _board: chess.Board = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.setup(self.start_fen)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the board."""
        self.start_fen = fen or chess.STARTING_FEN
        self._board = chess.Board(self.start_fen)
        self.move_history.clear()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return Color.from_chess(self._board.turn)

    def piece_at(self, square: Square) -> tuple[PieceType, Color] | None:
        piece = self._board.piece_at(square.index)
        if piece is None:
            return None
        return PieceType(piece.piece_type), Color.from_chess(piece.color)

    def en_passant_target(self) -> Square | None:
        ep = self._board.ep_square
        return None if ep is None else Square.from_index(ep)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(self._board)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played since setup."""
        return len(self.move_history)

    @property
    def fullmove_number(self) -> int:
        return self._board.fullmove_number

    # ── Move submission ──────────────────────────────────────────────────

    def submit_move(self, move: Move) -> BoardSnapshot | None:
        """Play *move* if legal and return the post-move snapshot.

        Returns None, leaving the board untouched, for an illegal move.
        """
        cmove = move.to_chess()
        if not self._board.is_legal(cmove):
            _LOGGER.debug("Rules engine rejected %s", move)
            return None

        was_capture = self._board.is_capture(cmove)
        san = self._board.san(cmove)
        self._board.push(cmove)
        self.move_history.append(
            MoveRecord(
                move=move,
                san=san,
                fen_after=self._board.fen(),
                was_capture=was_capture,
            )
        )
        return self.snapshot()
