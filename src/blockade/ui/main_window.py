"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from blockade.core.enums import Side
from blockade.game.engine import GameEngine
from blockade.game.interfaces import ActionMode
from blockade.ui.board.board_view import BoardView
from blockade.ui.i18n import LANGUAGES, set_language, t
from blockade.ui.input_session import ClickOutcome, InputSession, MessageKind
from blockade.ui.panels.control_panel import ControlPanel
from blockade.ui.panels.player_info import PlayerInfoPanel
from blockade.ui.settings import AppSettings
from blockade.ui.styles.theme import STATUS_COLORS, BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Blockade."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        engine: GameEngine | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(720, 520)
        self.resize(900, 640)

        self._settings = settings or AppSettings()
        self._session = InputSession(engine or GameEngine())

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        # Start with a fresh game
        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        body = QHBoxLayout()
        body.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        body.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._player_info = PlayerInfoPanel()
        right.addWidget(self._player_info)
        right.addStretch(1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        body.addWidget(right_widget)
        root.addLayout(body, stretch=1)

        # Status message (bottom)
        self._status_label = QLabel()
        self._status_label.setObjectName("statusMessage")
        self._status_label.setWordWrap(True)
        root.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_language = menu_bar.addMenu("")
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        self._language_group.setExclusive(True)
        self._language_actions: dict[str, QAction] = {}
        for language in LANGUAGES:
            act = QAction(language, self)
            act.setCheckable(True)
            act.triggered.connect(
                lambda _checked=False, lang=language: self.change_language(lang)
            )
            self._language_group.addAction(act)
            self._menu_language.addAction(act)
            self._language_actions[language] = act

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._control_panel.mode_changed.connect(self._on_mode_changed)
        self._control_panel.new_game_clicked.connect(self.new_game)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        if self._menu_game is not None:
            self._menu_game.setTitle(s.menu_game)
        if self._menu_language is not None:
            self._menu_language.setTitle(s.menu_language)
        self._act_new_game.setText(s.menu_new_game)
        self._act_quit.setText(s.menu_quit)
        self._control_panel.retranslate_ui()
        self._player_info.retranslate_ui()

    # ── Settings ─────────────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()
        act = self._language_actions.get(s.language)
        if act is not None:
            act.setChecked(True)

        theme = BoardTheme.named(s.board_theme)
        scene = self._board_view.board_scene
        scene.set_theme(theme)
        self._player_info.set_theme(theme)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_valid_moves(s.show_valid_moves)

    def change_language(self, language: str) -> None:
        self._settings.language = language
        self._apply_settings()
        self._set_status(self._session.prompt(), MessageKind.INFO)

    # ── Game flow ────────────────────────────────────────────────────────

    @property
    def session(self) -> InputSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    @property
    def player_info(self) -> PlayerInfoPanel:
        return self._player_info

    def status_text(self) -> str:
        return self._status_label.text()

    def new_game(self) -> None:
        message = self._session.reset()
        self._control_panel.set_mode(ActionMode.MOVE)
        self._control_panel.set_game_active(True)
        self._board_view.board_scene.set_interactive(True)
        self._sync_board()
        self._set_status(message, MessageKind.INFO)
        _LOGGER.debug("UI reset for a new game")

    def _on_square_clicked(self, row: int, col: int) -> None:
        outcome = self._session.click((row, col))
        self._apply_outcome(outcome)

    def _on_mode_changed(self, mode: ActionMode) -> None:
        message = self._session.set_mode(mode)
        self._board_view.board_scene.clear_selection()
        self._set_status(message, MessageKind.INFO)

    def _apply_outcome(self, outcome: ClickOutcome) -> None:
        if outcome.board_changed:
            self._sync_board()
        self._board_view.board_scene.show_selection(
            outcome.selected, outcome.valid_targets
        )
        self._set_status(outcome.message, outcome.kind)

        if self._session.engine.is_game_over:
            self._board_view.board_scene.set_interactive(False)
            self._control_panel.set_game_active(False)

    def _sync_board(self) -> None:
        engine = self._session.engine
        self._board_view.board_scene.set_board(engine.board)
        self._player_info.update_info(
            engine.current_player,
            {side: engine.obstacles_remaining(side) for side in Side},
        )

    def _set_status(self, message: str, kind: MessageKind) -> None:
        self._status_label.setText(message)
        self._status_label.setStyleSheet(f"color: {STATUS_COLORS[kind.value]};")
