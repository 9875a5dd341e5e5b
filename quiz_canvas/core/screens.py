"""Screen variants handed to the renderer, one per quiz state."""

from __future__ import annotations

from dataclasses import dataclass

from quiz_canvas.core.models import LayoutGeometry, QuizQuestion, ResultTier


@dataclass(frozen=True, slots=True)
class StartScreen:
    title: str
    subtitle: str


@dataclass(frozen=True, slots=True)
class QuestionScreen:
    question: QuizQuestion
    question_number: int
    total: int
    geometry: LayoutGeometry
    hovered_option: int = -1


@dataclass(frozen=True, slots=True)
class FeedbackScreen:
    correct: bool
    message: str
    selected_option: int


@dataclass(frozen=True, slots=True)
class ResultScreen:
    score: int
    total: int
    tier: ResultTier


Screen = StartScreen | QuestionScreen | FeedbackScreen | ResultScreen
