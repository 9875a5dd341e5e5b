"""Quiz-related constants shared across UI and core layers."""

TOP_TIER_THRESHOLD: float = 0.8
MID_TIER_THRESHOLD: float = 0.5
DEFAULT_QUIZ_FILES: tuple[str, ...] = ("questions.csv", "quiz_questions.txt")
CSV_QUESTION_COLUMN: str = "Question"
CSV_OPTION_COLUMNS: tuple[str, ...] = ("OptionA", "OptionB", "OptionC", "OptionD")
CSV_CORRECT_COLUMN: str = "CorrectOption"
