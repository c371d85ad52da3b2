"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from checkie.ui.styles.theme import APP_STYLE

    app.setApplicationName("Checkie")
    available = {style.lower() for style in _style_keys()}
    if "fusion" in available:
        app.setStyle("Fusion")
    else:
        _LOGGER.warning("Fusion style unavailable, using the platform default")
    app.setStyleSheet(APP_STYLE)


def _style_keys() -> list[str]:
    from PyQt6.QtWidgets import QStyleFactory

    return list(QStyleFactory.keys())


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from checkie.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()

    return app.exec()
