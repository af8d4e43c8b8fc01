"""
QApplication factory for the raindrop window.
"""
from __future__ import annotations

import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from raindrops import __version__

APP_ID = "raindrops"
VISIBLE_APP_NAME = "Raindrops"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Return the running QApplication, creating it on first use."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)

    QCoreApplication.setApplicationName(APP_ID)
    QCoreApplication.setApplicationVersion(__version__)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    # The animation has a single window; closing it ends the timer and the process
    app.setQuitOnLastWindowClosed(True)
    return app
