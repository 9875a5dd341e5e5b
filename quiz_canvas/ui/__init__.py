"""Qt UI components for the quiz canvas."""

from .quiz_canvas_widget import QuizCanvasWidget
from .quiz_window import QuizWindow
from .render_dispatcher import RenderDispatcher

__all__ = [
    "QuizCanvasWidget",
    "QuizWindow",
    "RenderDispatcher",
]
