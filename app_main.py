"""Application entry point for QuizTaker."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_taker.core.quiz_manager import QuizManager
from quiz_taker.core.services.quiz_catalog import QuizCatalog
from quiz_taker.core.services.quiz_session import QuizSession
from quiz_taker.ui.main_window import QuizMainWindow
from quiz_taker.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the catalog/session pair, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting QuizTaker…")

    quiz_manager = QuizManager(catalog=QuizCatalog(), session=QuizSession())

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_manager=quiz_manager)
    window.resize(960, 720)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
