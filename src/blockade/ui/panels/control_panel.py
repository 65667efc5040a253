"""ControlPanel — action mode toggle and game buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from blockade.game.interfaces import ActionMode
from blockade.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for choosing the action mode and starting a new game."""

    mode_changed = pyqtSignal(object)  # ActionMode
    new_game_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Sans Serif", 10)

        row1 = QHBoxLayout()
        self._btn_move = QPushButton()
        self._btn_obstacle = QPushButton()
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        for btn, mode in (
            (self._btn_move, ActionMode.MOVE),
            (self._btn_obstacle, ActionMode.OBSTACLE),
        ):
            btn.setFont(btn_font)
            btn.setMinimumHeight(36)
            btn.setCheckable(True)
            self._mode_group.addButton(btn, int(mode))
            row1.addWidget(btn)
        self._btn_move.setChecked(True)
        self._mode_group.idClicked.connect(self._on_mode_clicked)
        layout.addLayout(row1)

        self._btn_new = QPushButton()
        self._btn_new.setFont(btn_font)
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_move.setText(s.btn_move)
        self._btn_obstacle.setText(s.btn_obstacle)
        self._btn_new.setText(s.btn_new_game)

    @property
    def mode(self) -> ActionMode:
        return ActionMode(self._mode_group.checkedId())

    def set_mode(self, mode: ActionMode) -> None:
        """Reflect *mode* in the toggle buttons without emitting a signal."""
        button = self._mode_group.button(int(mode))
        if button is not None:
            button.setChecked(True)

    def set_game_active(self, active: bool) -> None:
        """Enable/disable mode buttons based on game state."""
        self._btn_move.setEnabled(active)
        self._btn_obstacle.setEnabled(active)

    def _on_mode_clicked(self, mode_id: int) -> None:
        self.mode_changed.emit(ActionMode(mode_id))
