"""Visual theme constants and QSS styles for Gambit."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# RGBA overlays shared by every preset.
_SELECTED = (255, 255, 0, 100)
_LEGAL_DOT = (0, 0, 0, 40)
_CHECK = (255, 0, 0, 120)
_LAST_MOVE = (155, 199, 0, 105)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard and the glyph pieces on it."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected square
    highlight_to: QColor  # legal destination dots
    highlight_check: QColor  # king in check
    last_move: QColor
    coord_light: QColor  # label colour on dark squares
    coord_dark: QColor  # label colour on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def from_squares(
        cls, light: tuple[int, int, int], dark: tuple[int, int, int]
    ) -> BoardTheme:
        """Build a theme from two square colours; labels use the opposite one."""
        return cls(
            light_square=QColor(*light),
            dark_square=QColor(*dark),
            highlight_from=QColor(*_SELECTED),
            highlight_to=QColor(*_LEGAL_DOT),
            highlight_check=QColor(*_CHECK),
            last_move=QColor(*_LAST_MOVE),
            coord_light=QColor(*dark),
            coord_dark=QColor(*light),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.from_squares((240, 217, 181), (181, 136, 99))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls.from_squares((222, 227, 230), (140, 162, 173))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls.from_squares((236, 238, 220), (112, 149, 120))


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}

APP_STYLE = """
QMainWindow, QWidget {
    background-color: #262421;
    color: #e0e0e0;
}
QPushButton {
    background-color: #3c3a37;
    border: 1px solid #4a4845;
    border-radius: 4px;
    padding: 6px 12px;
}
QPushButton:hover {
    background-color: #4a4845;
}
QLabel#statusLine {
    font-size: 15px;
    font-weight: bold;
    padding: 6px;
}
"""
