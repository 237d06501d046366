"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

from tapboard.game.interfaces import EngineUnavailableError, IRulesEngine
from tapboard.game.session import GameSession

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from tapboard.ui.settings import BoardSettings

_LOGGER = logging.getLogger(__name__)

EngineFactory = Callable[[], IRulesEngine]


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from tapboard.ui.styles.theme import APP_STYLE

    app.setApplicationName("Tapboard")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def report_fatal_error(message: str) -> None:
    """Show the single user-visible startup error."""
    from PyQt6.QtWidgets import QMessageBox

    QMessageBox.critical(None, "Tapboard", message)


def run_application(
    engine_factory: EngineFactory,
    argv: list[str] | None = None,
    settings: BoardSettings | None = None,
) -> int:
    """Create and run the main Qt application.

    If the first engine cannot be created, nothing else is built: the error
    is reported once and exit code 1 is returned.
    """
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    try:
        first_engine = engine_factory()
    except EngineUnavailableError as exc:
        _LOGGER.exception("Rules engine unavailable")
        report_fatal_error(str(exc))
        return 1

    from tapboard.ui.main_window import MainWindow

    engines = iter([first_engine])

    def _new_session() -> GameSession:
        return GameSession(next(engines, None) or engine_factory())

    window = MainWindow(_new_session, settings)
    window.show()

    return app.exec()
