"""Visual theme constants and QSS styles for Blockade."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_square: QColor
    dark_square: QColor
    obstacle: QColor
    player_x: QColor
    player_o: QColor
    highlight_selected: QColor  # armed piece
    highlight_valid: QColor  # valid move targets
    coord_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(222, 196, 156),
            obstacle=QColor(70, 70, 70),
            player_x=QColor(200, 40, 40),  # red
            player_o=QColor(30, 90, 200),  # blue
            highlight_selected=QColor(255, 255, 0, 110),  # yellow transparent
            highlight_valid=QColor(155, 199, 0, 105),  # green
            coord_text=QColor(110, 80, 50),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(196, 205, 212),
            obstacle=QColor(45, 52, 60),
            player_x=QColor(214, 69, 65),
            player_o=QColor(52, 110, 190),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_valid=QColor(0, 0, 0, 40),
            coord_text=QColor(90, 105, 115),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names give the default."""
        if name == "Slate":
            return cls.slate()
        return cls.default()


# Status line colours by message kind.
STATUS_COLORS: dict[str, str] = {
    "info": "#e0e0e0",
    "success": "#7bc96f",
    "error": "#f07070",
}


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #2b2b2b;
    color: #e0e0e0;
}
QPushButton {
    background-color: #3c3f41;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 12px;
}
QPushButton:hover {
    background-color: #4c5052;
}
QPushButton:checked {
    background-color: #4a6da7;
    border-color: #6a8dc7;
}
QLabel#statusMessage {
    font-size: 14px;
    padding: 6px;
}
"""
