"""Utilities for loading a question bank from disk.

Two formats are accepted.

CSV (``.csv``) with a header row::

    Question,OptionA,OptionB,OptionC,OptionD,CorrectOption
    What is 2 + 2?,3,4,5,22,1

``CorrectOption`` is the zero-based index of the right answer. Rows that are
missing a field or whose ``CorrectOption`` is not an integer are skipped with a
warning; an index outside 0-3 is kept and simply never matches a click.

Plain text (any other suffix), blocks separated by blank lines or ``---``::

    Q: What is 2 + 2?
    A: 3
    B: 4
    C: 5
    D: 22
    CORRECT: B
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from itertools import groupby
import logging
from pathlib import Path
import re

from quiz_canvas.constants.quiz_constants import (
    CSV_CORRECT_COLUMN,
    CSV_OPTION_COLUMNS,
    CSV_QUESTION_COLUMN,
)
from quiz_canvas.core.models import QuizQuestion
from quiz_canvas.core.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a question bank cannot be loaded at all."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for the loaded bank and how many rows had to be dropped."""

    source_path: Path
    bank: QuestionBank
    skipped_rows: int = 0


_OPTION_LETTERS = ("A", "B", "C", "D")
_TEXT_SECTIONS = ("Q", *_OPTION_LETTERS)
_SECTION_MARKER = re.compile(r"^(Q|A|B|C|D|CORRECT)\s*:\s*(.*)$", re.IGNORECASE)


def load_question_bank(file_path: Path) -> ImportedQuiz:
    """Load a bank from ``file_path``, choosing the parser by file suffix."""
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise QuizImportError(f"{file_path.name} is not valid UTF-8 text.") from exc

    if file_path.suffix.lower() == ".csv":
        questions, skipped = _parse_csv_text(text)
    else:
        questions, skipped = _parse_quiz_text(text), 0
    if not questions:
        raise QuizImportError(f"{file_path.name} did not contain any usable questions.")
    logger.info("Loaded %d question(s) from %s", len(questions), file_path)
    return ImportedQuiz(source_path=file_path, bank=QuestionBank(questions), skipped_rows=skipped)


def _field_problem(question_text: str, options: tuple[str, ...]) -> str | None:
    """Return why the fields cannot form a question, or None when they can."""
    if not question_text:
        return "question text is missing"
    if len(options) != len(_OPTION_LETTERS):
        return "each question must define exactly four options (A-D)"
    if any(not option for option in options):
        return "option text cannot be empty"
    return None


def _parse_csv_text(text: str) -> tuple[list[QuizQuestion], int]:
    reader = csv.DictReader(text.splitlines())
    required = (CSV_QUESTION_COLUMN, *CSV_OPTION_COLUMNS, CSV_CORRECT_COLUMN)

    questions: list[QuizQuestion] = []
    skipped = 0
    try:
        missing = [column for column in required if column not in (reader.fieldnames or [])]
        if missing:
            raise QuizImportError(f"CSV header is missing column(s): {', '.join(missing)}")
        # Header is line 1, so data rows start at 2.
        for line_number, row in enumerate(reader, start=2):
            question = _parse_csv_row(row, line_number)
            if question is None:
                skipped += 1
                continue
            questions.append(question)
    except csv.Error as exc:
        raise QuizImportError(f"CSV could not be parsed: {exc}") from exc
    return questions, skipped


def _parse_csv_row(row: dict[str, str | None], line_number: int) -> QuizQuestion | None:
    question_text = (row.get(CSV_QUESTION_COLUMN) or "").strip()
    options = tuple((row.get(column) or "").strip() for column in CSV_OPTION_COLUMNS)
    raw_correct = (row.get(CSV_CORRECT_COLUMN) or "").strip()

    problem = _field_problem(question_text, options)
    if problem is not None:
        logger.warning("Skipping CSV row %d: %s", line_number, problem)
        return None
    try:
        correct_index = int(raw_correct)
    except ValueError:
        logger.warning("Skipping CSV row %d: CorrectOption %r is not an integer", line_number, raw_correct)
        return None
    if not 0 <= correct_index < len(options):
        logger.warning(
            "CSV row %d: CorrectOption %d is out of range; no answer will be accepted",
            line_number,
            correct_index,
        )
    return QuizQuestion(question_text=question_text, options=options, correct_option_index=correct_index)


def _parse_quiz_text(text: str) -> list[QuizQuestion]:
    lines = [line.strip() for line in text.splitlines()]
    blocks = (
        list(group)
        for is_separator, group in groupby(lines, key=lambda line: not line or line == "---")
        if not is_separator
    )
    return [_parse_block(block, number) for number, block in enumerate(blocks, start=1)]


def _parse_block(lines: list[str], block_number: int) -> QuizQuestion:
    sections: dict[str, list[str]] = {}
    current: str | None = None
    for line in lines:
        marker = _SECTION_MARKER.match(line)
        if marker:
            current = marker.group(1).upper()
            sections[current] = [marker.group(2).strip()]
        elif current in _TEXT_SECTIONS:
            sections[current].append(line)
        else:
            raise QuizImportError(
                f"Question {block_number}: text outside of a known section: '{line}'."
            )

    question_text = "\n".join(sections.get("Q", [])).strip()
    options = tuple(
        "\n".join(sections[letter]).strip() for letter in _OPTION_LETTERS if letter in sections
    )
    problem = _field_problem(question_text, options)
    if problem is not None:
        raise QuizImportError(f"Question {block_number}: {problem}.")

    correct_letter = " ".join(sections.get("CORRECT", [])).strip().upper()
    if not correct_letter:
        raise QuizImportError(f"Question {block_number}: needs a CORRECT: A|B|C|D line.")
    if correct_letter not in _OPTION_LETTERS:
        raise QuizImportError(f"Question {block_number}: CORRECT must be one of A, B, C, or D.")

    return QuizQuestion(
        question_text=question_text,
        options=options,
        correct_option_index=_OPTION_LETTERS.index(correct_letter),
    )
