"""Application entry point and setup for the typing speed test."""

import logging
import sys

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from linetype.core.passages import PassageRepository
from linetype.core.session import Session
from linetype.core.settings import Settings
from linetype.ui.main_window import MainWindow
from linetype.ui.ticker import QtTicker


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings and passages, then show the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Linetype")
    app.setApplicationDisplayName("Typing Speed Test")

    app_font = QFont(app.font())
    app_font.setPointSize(11)
    QGuiApplication.setFont(app_font)

    settings = Settings.load()
    passages = PassageRepository(settings.passages_path)
    ticker = QtTicker(app)
    session = Session.from_settings(settings, passages.all(), ticker)

    window = MainWindow(session)
    window.resize(960, 640)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
