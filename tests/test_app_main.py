import logging

import pytest

from app_main import _resolve_quiz_path, load_bank_or_empty

CSV_HEADER = "Question,OptionA,OptionB,OptionC,OptionD,CorrectOption\n"


@pytest.fixture
def logger():
    return logging.getLogger("quiz_canvas.test_app_main")


def test_no_quiz_file_starts_empty(logger, caplog):
    with caplog.at_level(logging.WARNING):
        bank = load_bank_or_empty(None, logger)

    assert len(bank) == 0
    assert "No quiz file found" in caplog.text
    assert "questions.csv" in caplog.text


def test_missing_path_starts_empty(tmp_path, logger, caplog):
    with caplog.at_level(logging.WARNING):
        bank = load_bank_or_empty(tmp_path / "absent.csv", logger)

    assert len(bank) == 0
    assert "Could not load" in caplog.text


def test_file_without_usable_rows_starts_empty(tmp_path, logger, caplog):
    path = tmp_path / "questions.csv"
    path.write_text(CSV_HEADER + "Broken?,a,,c,d,0\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        bank = load_bank_or_empty(path, logger)

    assert len(bank) == 0
    assert "did not contain any usable questions" in caplog.text


def test_skipped_rows_are_reported_and_good_rows_kept(tmp_path, logger, caplog):
    path = tmp_path / "questions.csv"
    path.write_text(CSV_HEADER + "Broken?,a,b,c,d,X\nFine?,a,b,c,d,2\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        bank = load_bank_or_empty(path, logger)

    assert len(bank) == 1
    assert bank.get(0).question_text == "Fine?"
    assert "Skipped 1 malformed row(s)" in caplog.text


def test_non_utf8_file_starts_empty_instead_of_crashing(tmp_path, logger, caplog):
    path = tmp_path / "questions.csv"
    path.write_bytes((CSV_HEADER + "Café?,a,b,c,d,0\n").encode("cp1252"))

    with caplog.at_level(logging.WARNING):
        bank = load_bank_or_empty(path, logger)

    assert len(bank) == 0
    assert "not valid UTF-8" in caplog.text


def test_command_line_path_wins(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "questions.csv").write_text(CSV_HEADER, encoding="utf-8")

    assert str(_resolve_quiz_path(["app", "mine.txt"])) == "mine.txt"


def test_default_files_are_tried_in_order(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert _resolve_quiz_path(["app"]) is None

    (tmp_path / "quiz_questions.txt").write_text("", encoding="utf-8")
    assert str(_resolve_quiz_path(["app"])) == "quiz_questions.txt"

    (tmp_path / "questions.csv").write_text("", encoding="utf-8")
    assert str(_resolve_quiz_path(["app"])) == "questions.csv"
