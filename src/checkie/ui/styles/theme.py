"""Visual theme constants and QSS styles for Checkie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and stones."""

    light_square: QColor
    dark_square: QColor
    stone_a: QColor  # player A stones
    stone_b: QColor  # player B stones
    stone_outline: QColor
    king_mark: QColor  # crown ring on kings
    highlight_from: QColor  # selected stone origin
    highlight_to: QColor  # drop zones
    last_move: QColor  # last move origin/destination

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            stone_a=QColor(245, 240, 230),
            stone_b=QColor(40, 36, 34),
            stone_outline=QColor(20, 20, 20),
            king_mark=QColor(212, 175, 55),  # gold
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 160, 0, 90),
            last_move=QColor(155, 199, 0, 105),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            stone_a=QColor(250, 250, 250),
            stone_b=QColor(178, 34, 34),
            stone_outline=QColor(30, 30, 30),
            king_mark=QColor(212, 175, 55),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            last_move=QColor(155, 199, 0, 105),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            stone_a=QColor(240, 232, 215),
            stone_b=QColor(25, 25, 25),
            stone_outline=QColor(10, 10, 10),
            king_mark=QColor(212, 175, 55),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            last_move=QColor(155, 199, 0, 105),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        return THEMES.get(name, cls.default)()


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Walnut": BoardTheme.walnut,
}


APP_STYLE = """
QMainWindow, QDialog {
    background-color: #2b2b2b;
    color: #e0e0e0;
}
QLabel {
    color: #e0e0e0;
}
QStatusBar {
    background-color: #232323;
    color: #c8c8c8;
}
QMenuBar {
    background-color: #232323;
    color: #e0e0e0;
}
QMenuBar::item:selected, QMenu::item:selected {
    background-color: #3d5a80;
}
QMenu {
    background-color: #2f2f2f;
    color: #e0e0e0;
}
"""
