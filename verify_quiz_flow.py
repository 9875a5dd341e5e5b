
from quiz_canvas.core.models import QuizQuestion, QuizState, ResultTier
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.core.services.question_bank import QuestionBank


def _center(rect):
    return rect.x + rect.w / 2, rect.y + rect.h / 2


def verify_quiz_flow():
    print("Building a two-question bank...")
    bank = QuestionBank([
        QuizQuestion(question_text="Q1", options=("A", "B", "C", "D"), correct_option_index=0),
        QuizQuestion(question_text="Q2", options=("w", "x", "y", "z"), correct_option_index=1),
    ])
    controller = QuizController(bank, 800, 600)
    assert controller.state == QuizState.START

    # 1. Start
    print("Clicking the start screen...")
    controller.handle_click(1, 1)
    assert controller.state == QuizState.QUESTION

    # 2. Answer first question correctly
    print("Answering question 1 with option A...")
    controller.handle_click(*_center(controller.geometry.option_rects[0]))
    assert controller.state == QuizState.FEEDBACK
    assert controller.session.score == 1

    # 3. Continue
    controller.handle_click(1, 1)
    assert controller.state == QuizState.QUESTION
    assert controller.session.current_index == 1

    # 4. Answer second question wrongly
    print("Answering question 2 with option A (wrong)...")
    controller.handle_click(*_center(controller.geometry.option_rects[0]))
    assert controller.session.score == 1
    assert "x" in controller.session.feedback_text
    print(f"Feedback: {controller.session.feedback_text}")

    # 5. Results
    controller.handle_click(1, 1)
    assert controller.state == QuizState.RESULT
    assert controller.result_tier() == ResultTier.MID
    print(f"Final score: {controller.session.score} / {controller.total_questions}")

    print("\nSUCCESS: Quiz flow verification passed!")

if __name__ == "__main__":
    verify_quiz_flow()
