"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

import chess


@dataclass
class SessionSettings:
    """All user-configurable settings for a game session."""

    # Game
    start_fen: str = chess.STARTING_FEN

    # Board
    highlight_hover: bool = True
    highlight_selection: bool = True

    # Diagnostics
    verify_registry: bool = False  # compare registry to board after each move
