"""Shared fixtures for the quiz canvas tests."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from quiz_canvas.core.models import QuizQuestion
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.core.services.question_bank import QuestionBank


def make_question(correct_option_index: int, text: str = "Question?", prefix: str = "opt") -> QuizQuestion:
    return QuizQuestion(
        question_text=text,
        options=tuple(f"{prefix}{idx}" for idx in range(4)),
        correct_option_index=correct_option_index,
    )


def make_bank(*correct_indices: int) -> QuestionBank:
    return QuestionBank(
        make_question(correct, text=f"Question {number}?", prefix=f"q{number}-")
        for number, correct in enumerate(correct_indices, start=1)
    )


def option_center(controller: QuizController, index: int) -> tuple[float, float]:
    rect = controller.geometry.option_rects[index]
    return rect.x + rect.w / 2, rect.y + rect.h / 2


@pytest.fixture
def two_question_controller() -> QuizController:
    return QuizController(make_bank(0, 1), 800, 600)
