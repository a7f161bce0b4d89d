"""Square shading for the board view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from PyQt6.QtGui import QColor

from chesster.config import SessionSettings
from chesster.core.types import Square
from chesster.game.selection import Selection


class SquareShade(IntEnum):
    """What a square should look like, strongest first."""

    HOVERED = auto()
    SELECTED = auto()
    LIGHT = auto()
    DARK = auto()


def square_shade(
    square: Square,
    hovered: Square | None,
    selection: Selection,
    settings: SessionSettings | None = None,
) -> SquareShade:
    """Pick the shade for *square*: hover beats selection beats parity."""
    settings = settings or SessionSettings()
    if settings.highlight_hover and square == hovered:
        return SquareShade.HOVERED
    if settings.highlight_selection and square == selection.square:
        return SquareShade.SELECTED
    return SquareShade.LIGHT if square.is_light else SquareShade.DARK


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_hover: QColor  # square under the pointer
    highlight_selected: QColor  # selected square

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor.fromRgbF(1.0, 0.9, 0.9),
            dark_square=QColor.fromRgbF(0.0, 0.1, 0.1),
            highlight_hover=QColor.fromRgbF(0.8, 0.3, 0.3),
            highlight_selected=QColor.fromRgbF(0.9, 0.1, 0.1),
        )

    def color_for(self, shade: SquareShade) -> QColor:
        return {
            SquareShade.HOVERED: self.highlight_hover,
            SquareShade.SELECTED: self.highlight_selected,
            SquareShade.LIGHT: self.light_square,
            SquareShade.DARK: self.dark_square,
        }[shade]
