"""Qt widget hosting the quiz: frame timer, input events and painting."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from quiz_canvas.constants.ui_constants import (
    FRAME_INTERVAL_MS,
    MINIMUM_WINDOW_HEIGHT,
    MINIMUM_WINDOW_WIDTH,
)
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.ui.render_dispatcher import RenderDispatcher

logger = logging.getLogger(__name__)


class QuizCanvasWidget(QWidget):
    """Drawing surface that forwards clicks, pointer moves and resizes to the controller."""

    def __init__(self, controller: QuizController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.dispatcher = RenderDispatcher()

        self.setMinimumSize(MINIMUM_WINDOW_WIDTH, MINIMUM_WINDOW_HEIGHT)
        self.setMouseTracking(True)
        self.setCursor(Qt.CursorShape.BlankCursor)
        self._configure_frame_timer()

    def _configure_frame_timer(self) -> None:
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self._tick)
        self.frame_timer.start()

    def _tick(self) -> None:
        self.controller.advance_frame()
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.dispatcher.render(painter, self.controller)
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.controller.resize(size.width(), size.height())
        super().resizeEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        position = event.position()
        self.controller.handle_pointer_move(position.x(), position.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        position = event.position()
        self.controller.handle_pointer_move(position.x(), position.y())
        if self.controller.handle_click(position.x(), position.y()):
            logger.debug("Click at (%.0f, %.0f) -> %s", position.x(), position.y(), self.controller.state.name)
        self.update()
