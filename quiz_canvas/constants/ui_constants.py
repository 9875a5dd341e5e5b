"""Qt UI constants used by the quiz canvas."""

WINDOW_TITLE: str = "QuizCanvas"
DEFAULT_WINDOW_WIDTH: int = 800
DEFAULT_WINDOW_HEIGHT: int = 600
MINIMUM_WINDOW_WIDTH: int = 360
MINIMUM_WINDOW_HEIGHT: int = 360
FRAME_INTERVAL_MS: int = 16

START_TITLE: str = "Interactive Quiz"
START_SUBTITLE: str = "Click anywhere to start the quiz"

FEEDBACK_CORRECT_TITLE: str = "Correct! Well done!"
FEEDBACK_WRONG_TITLE: str = "Not quite... keep going!"
FEEDBACK_CORRECT_MESSAGE: str = "Correct!"
FEEDBACK_WRONG_TEMPLATE: str = "Wrong... the correct answer is {answer}"
FEEDBACK_NO_ANSWER_MESSAGE: str = "Wrong... no option is marked as correct for this question."
FEEDBACK_CONTINUE_HINT: str = "Click to continue..."

RESULT_TITLE: str = "Quiz complete!"
RESULT_SCORE_TEMPLATE: str = "Your final score: {score} / {total}"
RESULT_TOP_CAPTION: str = "Congratulations! Outstanding!"
RESULT_MID_CAPTION: str = "Nice work! Keep it up!"
RESULT_LOW_CAPTION: str = "No worries, next time will be better!"
RESULT_CAPTION_FONT_SIZE: int = 50
