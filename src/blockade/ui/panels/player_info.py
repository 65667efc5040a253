"""PlayerInfoPanel — whose turn it is and obstacles left per player."""

from __future__ import annotations

from PyQt6.QtWidgets import QFormLayout, QLabel, QWidget

from blockade.core.enums import Side
from blockade.ui.i18n import t
from blockade.ui.styles.theme import BoardTheme


class PlayerInfoPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._current = Side.X
        self._obstacles: dict[Side, int] = {Side.X: 0, Side.O: 0}
        self._theme = BoardTheme.default()
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        form = QFormLayout(self)
        form.setContentsMargins(8, 8, 8, 8)
        form.setSpacing(6)

        self._current_caption = QLabel()
        self._current_value = QLabel()
        form.addRow(self._current_caption, self._current_value)

        self._obstacle_captions: dict[Side, QLabel] = {}
        self._obstacle_values: dict[Side, QLabel] = {}
        for side in Side:
            caption, value = QLabel(), QLabel()
            self._obstacle_captions[side] = caption
            self._obstacle_values[side] = value
            form.addRow(caption, value)

    def retranslate_ui(self) -> None:
        s = t()
        self._current_caption.setText(s.info_current_player)
        for side, caption in self._obstacle_captions.items():
            caption.setText(s.info_obstacles_left.format(player=side))
        self._refresh()

    def update_info(self, current: Side, obstacles: dict[Side, int]) -> None:
        self._current = current
        self._obstacles = dict(obstacles)
        self._refresh()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._refresh()

    def current_text(self) -> str:
        return self._current_value.text()

    def obstacles_text(self, side: Side) -> str:
        return self._obstacle_values[side].text()

    def _refresh(self) -> None:
        self._current_value.setText(str(self._current))
        self._current_value.setStyleSheet(
            f"font-weight: bold; color: {self._side_color(self._current)};"
        )
        for side, label in self._obstacle_values.items():
            label.setText(str(self._obstacles.get(side, 0)))
            label.setStyleSheet(f"color: {self._side_color(side)};")

    def _side_color(self, side: Side) -> str:
        color = self._theme.player_x if side == Side.X else self._theme.player_o
        return color.name()
