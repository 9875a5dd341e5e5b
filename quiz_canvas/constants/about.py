"""Static metadata describing QuizCanvas."""

APP_NAME = "QuizCanvas"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizCanvas is a single-screen multiple-choice quiz drawn on a resizable Qt canvas. "
    "Click an answer, get instant feedback, and finish with a score-based celebration."
)
