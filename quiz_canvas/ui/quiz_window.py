"""Main window wrapping the quiz canvas."""

from __future__ import annotations

from PySide6.QtWidgets import QMainWindow

from quiz_canvas.constants.ui_constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    WINDOW_TITLE,
)
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.styling import Styles
from quiz_canvas.ui.quiz_canvas_widget import QuizCanvasWidget


class QuizWindow(QMainWindow):
    """Top-level window whose whole client area is the quiz canvas."""

    def __init__(self, controller: QuizController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet(Styles.get_main_window_style())

        self.canvas = QuizCanvasWidget(controller, self)
        self.setCentralWidget(self.canvas)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
