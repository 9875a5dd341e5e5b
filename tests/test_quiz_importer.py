import csv
import logging

import pytest

from quiz_canvas.core.quiz_importer import QuizImportError, load_question_bank

CSV_HEADER = "Question,OptionA,OptionB,OptionC,OptionD,CorrectOption\n"


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_csv_rows_become_questions_in_order(tmp_path):
    path = _write(
        tmp_path,
        "questions.csv",
        CSV_HEADER + "What is 2 + 2?,3,4,5,22,1\nCapital of France?,Paris,Rome,Oslo,Bern,0\n",
    )

    imported = load_question_bank(path)

    assert len(imported.bank) == 2
    first = imported.bank.get(0)
    assert first.question_text == "What is 2 + 2?"
    assert first.options == ("3", "4", "5", "22")
    assert first.correct_option_index == 1
    assert imported.bank.get(1).correct_option_text() == "Paris"
    assert imported.skipped_rows == 0


def test_csv_skips_malformed_rows(tmp_path, caplog):
    path = _write(
        tmp_path,
        "questions.csv",
        CSV_HEADER
        + "Missing an option?,a,b,,d,0\n"
        + "Bad index?,a,b,c,d,B\n"
        + "Fine?,a,b,c,d,2\n",
    )

    with caplog.at_level(logging.WARNING):
        imported = load_question_bank(path)

    assert len(imported.bank) == 1
    assert imported.skipped_rows == 2
    assert "Skipping CSV row 2" in caplog.text
    assert "Skipping CSV row 3" in caplog.text


def test_csv_keeps_out_of_range_correct_index(tmp_path):
    path = _write(tmp_path, "questions.csv", CSV_HEADER + "Trick?,a,b,c,d,9\n")

    imported = load_question_bank(path)

    question = imported.bank.get(0)
    assert question.correct_option_index == 9
    assert not question.has_valid_answer()
    assert question.correct_option_text() is None


def test_csv_with_byte_order_mark(tmp_path):
    path = tmp_path / "questions.csv"
    path.write_text(CSV_HEADER + "Q?,a,b,c,d,3\n", encoding="utf-8-sig")

    assert load_question_bank(path).bank.get(0).correct_option_index == 3


def test_csv_missing_column_raises(tmp_path):
    path = _write(tmp_path, "questions.csv", "Question,OptionA\nQ?,a\n")

    with pytest.raises(QuizImportError, match="CorrectOption"):
        load_question_bank(path)


def test_csv_without_rows_raises(tmp_path):
    path = _write(tmp_path, "questions.csv", CSV_HEADER)

    with pytest.raises(QuizImportError):
        load_question_bank(path)


def test_text_format_blocks(tmp_path):
    path = _write(
        tmp_path,
        "quiz_questions.txt",
        "Q: What is 2 + 2?\nA: 3\nB: 4\nC: 5\nD: 22\nCORRECT: B\n\n"
        "---\n\n"
        "Q: Pick the vowel\n   (only one)\nA: b\nB: c\nC: a\nD: d\nCORRECT: c\n",
    )

    imported = load_question_bank(path)

    assert len(imported.bank) == 2
    assert imported.bank.get(0).correct_option_index == 1
    second = imported.bank.get(1)
    assert second.question_text == "Pick the vowel\n(only one)"
    assert second.correct_option_index == 2


def test_text_format_requires_correct_line(tmp_path):
    path = _write(tmp_path, "quiz.txt", "Q: No answer?\nA: a\nB: b\nC: c\nD: d\n")

    with pytest.raises(QuizImportError, match="CORRECT"):
        load_question_bank(path)


def test_text_format_rejects_missing_options(tmp_path):
    path = _write(tmp_path, "quiz.txt", "Q: Too few?\nA: a\nB: b\nCORRECT: A\n")

    with pytest.raises(QuizImportError, match="four options"):
        load_question_bank(path)


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load_question_bank(tmp_path / "absent.csv")


def test_non_utf8_file_raises_import_error(tmp_path):
    path = tmp_path / "questions.csv"
    path.write_bytes((CSV_HEADER + "Café?,a,b,c,d,0\n").encode("cp1252"))

    with pytest.raises(QuizImportError, match="not valid UTF-8") as excinfo:
        load_question_bank(path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_unparseable_csv_raises_import_error(tmp_path):
    oversized = "x" * (csv.field_size_limit() + 1)
    path = _write(tmp_path, "questions.csv", CSV_HEADER + f"{oversized},a,b,c,d,0\n")

    with pytest.raises(QuizImportError, match="could not be parsed") as excinfo:
        load_question_bank(path)

    assert isinstance(excinfo.value.__cause__, csv.Error)


def test_csv_and_text_report_the_same_field_problem(tmp_path, caplog):
    csv_path = _write(tmp_path, "questions.csv", CSV_HEADER + ",a,b,c,d,0\nFine?,a,b,c,d,1\n")
    text_path = _write(tmp_path, "quiz.txt", "Q:\nA: a\nB: b\nC: c\nD: d\nCORRECT: A\n")

    with caplog.at_level(logging.WARNING):
        imported = load_question_bank(csv_path)
    assert imported.skipped_rows == 1
    assert "Skipping CSV row 2: question text is missing" in caplog.text

    with pytest.raises(QuizImportError, match="question text is missing"):
        load_question_bank(text_path)


def test_text_format_rejects_stray_lines(tmp_path):
    path = _write(tmp_path, "quiz.txt", "Q: Fine?\nA: a\nB: b\nC: c\nD: d\nCORRECT: A\nextra words\n")

    with pytest.raises(QuizImportError, match="outside of a known section"):
        load_question_bank(path)


def test_text_format_accepts_lowercase_markers(tmp_path):
    path = _write(tmp_path, "quiz.txt", "q: Lower?\na: w\nb: x\nc: y\nd: z\ncorrect: d\n")

    question = load_question_bank(path).bank.get(0)

    assert question.options == ("w", "x", "y", "z")
    assert question.correct_option_index == 3
