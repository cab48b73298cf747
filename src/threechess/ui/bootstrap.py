"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from threechess.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Route library logging to stderr at the configured level."""
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
    _LOGGER.debug("Logging configured at %s", settings.log_level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from threechess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Three-Player Chess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from threechess.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
