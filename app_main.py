"""Application entry point for Romedy Quiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from romedy_quiz.core.dataset_loader import (
    DatasetLoadError,
    load_default_questions,
    load_questions_from_file,
)
from romedy_quiz.core.quiz_controller import QuizController
from romedy_quiz.ui.quiz_main_window import QuizMainWindow
from romedy_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the quote dataset, and launch the Qt UI.

    An optional first argument names a JSON dataset to use instead of the
    bundled quotes.
    """
    logger = configure_logging()
    logger.info("Starting Romedy Quiz…")

    try:
        if len(sys.argv) > 1:
            dataset = load_questions_from_file(Path(sys.argv[1]))
        else:
            dataset = load_default_questions()
    except DatasetLoadError as exc:
        logger.error("Could not load quotes: %s", exc)
        sys.exit(1)

    controller = QuizController(dataset.questions)

    app = QApplication(sys.argv)
    window = QuizMainWindow(controller=controller)
    window.resize(900, 640)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
