"""Application entry point for QuizCanvas."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_canvas.constants.about import APP_NAME, APP_VERSION
from quiz_canvas.constants.quiz_constants import DEFAULT_QUIZ_FILES
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.core.quiz_importer import QuizImportError, load_question_bank
from quiz_canvas.core.services.question_bank import QuestionBank
from quiz_canvas.ui.quiz_window import QuizWindow
from quiz_canvas.utils.logging_config import configure_logging


def _resolve_quiz_path(argv: list[str]) -> Path | None:
    """Use the path given on the command line, else the first default file present."""
    if len(argv) > 1:
        return Path(argv[1])
    for name in DEFAULT_QUIZ_FILES:
        candidate = Path(name)
        if candidate.exists():
            return candidate
    return None


def load_bank_or_empty(quiz_path: Path | None, logger: logging.Logger) -> QuestionBank:
    """Load the question bank, falling back to an empty bank so the quiz still runs."""
    if quiz_path is None:
        logger.warning("No quiz file found (looked for %s); starting with no questions", ", ".join(DEFAULT_QUIZ_FILES))
        return QuestionBank()
    try:
        imported = load_question_bank(quiz_path)
    except (OSError, QuizImportError) as exc:
        logger.warning("Could not load %s: %s; starting with no questions", quiz_path, exc)
        return QuestionBank()
    if imported.skipped_rows:
        logger.warning("Skipped %d malformed row(s) in %s", imported.skipped_rows, quiz_path)
    return imported.bank


def main() -> None:
    """Initialize logging, load the question bank, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    bank = load_bank_or_empty(_resolve_quiz_path(sys.argv), logger)
    logger.info("Quiz has %d question(s)", len(bank))

    app = QApplication(sys.argv)
    window = QuizWindow(QuizController(bank))
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
