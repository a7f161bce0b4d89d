"""Qt-facing adapters: session signal bridge and square shading."""

from chesster.ui.qt_bridge import SessionBridge
from chesster.ui.theme import BoardTheme, SquareShade, square_shade

__all__ = [
    "BoardTheme",
    "SessionBridge",
    "SquareShade",
    "square_shade",
]
