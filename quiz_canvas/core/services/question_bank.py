"""Immutable, ordered collection of quiz questions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from quiz_canvas.core.models import QuizQuestion


class QuestionBank:
    """Read-only question set; insertion order is quiz order."""

    __slots__ = ("_questions",)

    def __init__(self, questions: Iterable[QuizQuestion] = ()) -> None:
        self._questions: tuple[QuizQuestion, ...] = tuple(questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[QuizQuestion]:
        return iter(self._questions)

    def __bool__(self) -> bool:
        return bool(self._questions)

    def length(self) -> int:
        return len(self._questions)

    def get(self, index: int) -> QuizQuestion:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        return self._questions[index]

    def __repr__(self) -> str:
        return f"QuestionBank({len(self._questions)} questions)"
