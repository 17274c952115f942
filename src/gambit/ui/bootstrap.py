"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from gambit.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)
_APP_NAME = "Gambit"


def _configure_application(app: QApplication) -> None:
    """Name the application and install the Fusion style plus stylesheet."""
    from gambit.ui.styles.theme import APP_STYLE

    app.setApplicationName(_APP_NAME)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create the Qt application, show a fresh game and run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from gambit.game.controller import GameController
    from gambit.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(controller=GameController(), settings=settings)
    window.show()
    _LOGGER.info("Main window shown, %s to move", window.controller.state.turn)

    status = app.exec()
    _LOGGER.debug("Event loop finished with status %d", status)
    return status
