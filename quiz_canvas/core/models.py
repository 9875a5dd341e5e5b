"""Domain models for the quiz canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class QuizState(Enum):
    """Which screen the quiz is currently showing."""

    START = auto()
    QUESTION = auto()
    FEEDBACK = auto()
    RESULT = auto()


class ResultTier(Enum):
    """Score band that picks the result animation and caption."""

    TOP = auto()
    MID = auto()
    LOW = auto()


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Multiple-choice quiz question with four options and one correct answer."""

    question_text: str
    options: tuple[str, ...]
    correct_option_index: int

    def has_valid_answer(self) -> bool:
        return 0 <= self.correct_option_index < len(self.options)

    def correct_option_text(self) -> str | None:
        if not self.has_valid_answer():
            return None
        return self.options[self.correct_option_index]


@dataclass(slots=True)
class QuizSession:
    """Progress of the single running quiz. Only QuizController mutates it."""

    current_index: int = 0
    score: int = 0
    state: QuizState = QuizState.START
    selected_option: int = -1
    feedback_text: str = ""
    last_answer_correct: bool = False


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, px: float, py: float) -> bool:
        """Strict containment: points on an edge are outside."""
        return self.x < px < self.right and self.y < py < self.bottom


@dataclass(frozen=True, slots=True)
class LayoutGeometry:
    """Everything the canvas needs to draw and hit-test one viewport size."""

    viewport_width: float
    viewport_height: float
    scale: float
    margin: float
    gap: float
    title_size: float
    subtitle_size: float
    question_size: float
    option_text_size: float
    button_height: float
    button_corner: float
    columns: int
    question_origin: tuple[float, float]
    options_top: float
    option_rects: tuple[Rect, ...] = ()
    question_index: int | None = None

    def option_at(self, px: float, py: float) -> int:
        """Return the index of the option rectangle containing the point, or -1."""
        for index, rect in enumerate(self.option_rects):
            if rect.contains(px, py):
                return index
        return -1


@dataclass(slots=True)
class Particle:
    """One star of a praise burst."""

    x: float
    y: float
    vx: float
    vy: float
    hue: float
    remaining_life: int = 255

    def is_finished(self) -> bool:
        return self.remaining_life < 0


@dataclass(slots=True)
class TrailPoint:
    x: float
    y: float


@dataclass(slots=True)
class CursorState:
    """Eased cursor position and the recent positions drawn as a trail."""

    x: float = 0.0
    y: float = 0.0
    trail: list[TrailPoint] = field(default_factory=list)
