"""Core domain layer — colors, piece types, squares and moves.

Legality lives in python-chess; these are the value types the game layer
passes around.

Quick start::

    from chesster.core import Move, Square

    move = Move(Square.parse("e2"), Square.parse("e4"))
    print(move.uci)
"""

from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.types import Square, all_squares, corner

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "corner",
    # Domain objects
    "Move",
]
