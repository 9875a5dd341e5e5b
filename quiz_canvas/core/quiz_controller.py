"""State machine driving the quiz: which screen is shown and how clicks are read."""

from __future__ import annotations

import logging

from quiz_canvas.constants.quiz_constants import MID_TIER_THRESHOLD, TOP_TIER_THRESHOLD
from quiz_canvas.constants.ui_constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    FEEDBACK_CORRECT_MESSAGE,
    FEEDBACK_NO_ANSWER_MESSAGE,
    FEEDBACK_WRONG_TEMPLATE,
    START_SUBTITLE,
    START_TITLE,
)
from quiz_canvas.core.layout_engine import LayoutEngine, compute_layout
from quiz_canvas.core.models import LayoutGeometry, QuizSession, QuizState, ResultTier
from quiz_canvas.core.particle_system import CursorTrail, ParticleSystem
from quiz_canvas.core.screens import (
    FeedbackScreen,
    QuestionScreen,
    ResultScreen,
    Screen,
    StartScreen,
)
from quiz_canvas.core.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)


def tier_for_percent(percent: float) -> ResultTier:
    if percent >= TOP_TIER_THRESHOLD:
        return ResultTier.TOP
    if percent >= MID_TIER_THRESHOLD:
        return ResultTier.MID
    return ResultTier.LOW


def classify_result_tier(score: int, total: int) -> ResultTier:
    """Map a final score onto a result tier; an empty quiz counts as the lowest tier."""
    percent = score / total if total > 0 else 0.0
    return tier_for_percent(percent)


class QuizController:
    """Owns the quiz session and interprets clicks against the current layout."""

    def __init__(
        self,
        bank: QuestionBank,
        viewport_width: float = DEFAULT_WINDOW_WIDTH,
        viewport_height: float = DEFAULT_WINDOW_HEIGHT,
        particle_system: ParticleSystem | None = None,
    ) -> None:
        self._bank = bank
        self._session = QuizSession()
        self._layout = LayoutEngine(viewport_width, viewport_height)
        self._particles = particle_system or ParticleSystem()
        self._cursor = CursorTrail()
        self._pointer: tuple[float, float] = (0.0, 0.0)
        self._frame_count = 0

    # --- Read-only views ---

    @property
    def session(self) -> QuizSession:
        return self._session

    @property
    def state(self) -> QuizState:
        return self._session.state

    @property
    def bank(self) -> QuestionBank:
        return self._bank

    @property
    def total_questions(self) -> int:
        return len(self._bank)

    @property
    def geometry(self) -> LayoutGeometry:
        return self._layout.geometry

    @property
    def particles(self) -> ParticleSystem:
        return self._particles

    @property
    def cursor(self) -> CursorTrail:
        return self._cursor

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def result_tier(self) -> ResultTier:
        return classify_result_tier(self._session.score, self.total_questions)

    # --- Input ---

    def handle_click(self, x: float, y: float) -> bool:
        """Apply one click. Returns True when the click changed the quiz state."""
        state = self._session.state
        if state == QuizState.START:
            self._enter_question()
            return True
        if state == QuizState.QUESTION:
            return self._answer_at(x, y)
        if state == QuizState.FEEDBACK:
            self._advance()
            return True
        return False

    def handle_pointer_move(self, x: float, y: float) -> None:
        self._pointer = (x, y)

    def resize(self, viewport_width: float, viewport_height: float) -> LayoutGeometry:
        return self._layout.resize(viewport_width, viewport_height)

    def advance_frame(self) -> None:
        """Advance the frame clock, the cursor trail and any active praise burst.

        Also applies the QUESTION/RESULT boundary guard, so painting that
        follows the tick never has to change state.
        """
        self._frame_count += 1
        if self._question_index_exhausted():
            logger.warning(
                "Question index %d is past the end of the bank; showing results",
                self._session.current_index,
            )
            self._finish()
        self._cursor.step(*self._pointer)
        if self._in_praise_context():
            width, height = self._layout.viewport_size
            self._particles.step_praise(self._frame_count, width / 2, height / 2)

    # --- Screens ---

    def current_screen(self) -> Screen:
        """Describe the screen to paint. Read-only: never mutates session or layout."""
        session = self._session
        if session.state == QuizState.START:
            return StartScreen(title=START_TITLE, subtitle=START_SUBTITLE)
        if session.state == QuizState.QUESTION and not self._question_index_exhausted():
            question = self._bank.get(session.current_index)
            geometry = self._layout.geometry
            if geometry.question_index != session.current_index:
                width, height = self._layout.viewport_size
                geometry = compute_layout(
                    width, height, option_count=len(question.options), question_index=session.current_index
                )
            return QuestionScreen(
                question=question,
                question_number=session.current_index + 1,
                total=self.total_questions,
                geometry=geometry,
                hovered_option=geometry.option_at(*self._pointer),
            )
        if session.state == QuizState.FEEDBACK:
            return FeedbackScreen(
                correct=session.last_answer_correct,
                message=session.feedback_text,
                selected_option=session.selected_option,
            )
        return ResultScreen(
            score=session.score,
            total=self.total_questions,
            tier=self.result_tier(),
        )

    # --- Transitions ---

    def _enter_question(self) -> None:
        index = self._session.current_index
        if index >= self.total_questions:
            self._finish()
            return
        question = self._bank.get(index)
        self._layout.layout_question(index, len(question.options))
        self._session.state = QuizState.QUESTION
        logger.debug("Showing question %d of %d", index + 1, self.total_questions)

    def _answer_at(self, x: float, y: float) -> bool:
        session = self._session
        if session.current_index >= self.total_questions:
            self._finish()
            return True

        option = self._question_geometry().option_at(x, y)
        if option < 0:
            return False

        question = self._bank.get(session.current_index)
        session.selected_option = option
        session.last_answer_correct = option == question.correct_option_index
        if session.last_answer_correct:
            session.score += 1
            session.feedback_text = FEEDBACK_CORRECT_MESSAGE
        else:
            answer = question.correct_option_text()
            if answer is None:
                logger.warning(
                    "Question %d has no valid correct option (%d)",
                    session.current_index + 1,
                    question.correct_option_index,
                )
                session.feedback_text = FEEDBACK_NO_ANSWER_MESSAGE
            else:
                session.feedback_text = FEEDBACK_WRONG_TEMPLATE.format(answer=answer)
        session.state = QuizState.FEEDBACK
        logger.info(
            "Question %d answered %s (score %d)",
            session.current_index + 1,
            "correctly" if session.last_answer_correct else "incorrectly",
            session.score,
        )
        return True

    def _advance(self) -> None:
        session = self._session
        self._particles.clear()
        session.current_index += 1
        session.selected_option = -1
        if session.current_index < self.total_questions:
            self._enter_question()
        else:
            self._finish()

    def _finish(self) -> None:
        session = self._session
        session.state = QuizState.RESULT
        session.selected_option = -1
        logger.info(
            "Quiz finished with %d / %d (%s tier)",
            session.score,
            self.total_questions,
            self.result_tier().name,
        )

    def _question_geometry(self) -> LayoutGeometry:
        geometry = self._layout.geometry
        index = self._session.current_index
        if geometry.question_index != index:
            question = self._bank.get(index)
            geometry = self._layout.layout_question(index, len(question.options))
        return geometry

    def _question_index_exhausted(self) -> bool:
        session = self._session
        return session.state == QuizState.QUESTION and session.current_index >= self.total_questions

    def _in_praise_context(self) -> bool:
        session = self._session
        if session.state == QuizState.FEEDBACK:
            return session.last_answer_correct
        if session.state == QuizState.RESULT:
            return self.result_tier() == ResultTier.TOP
        return False
