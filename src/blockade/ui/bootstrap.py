"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from blockade.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Root logging setup for the desktop app."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from blockade.ui.styles.theme import APP_STYLE

    app.setApplicationName("Blockade")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(settings: AppSettings, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from blockade.ui.main_window import MainWindow

    app = QApplication(sys.argv[:1] if argv is None else argv)
    _configure_application(app)
    _LOGGER.info(
        "Starting Blockade (language=%s, theme=%s)",
        settings.language,
        settings.board_theme,
    )

    window = MainWindow(settings)
    window.show()

    return app.exec()
