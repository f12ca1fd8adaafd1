"""Use case: score the user's choice for the current question."""

import logging

from spotify_quiz.domain.model import QuizSession
from spotify_quiz.domain.ports import QuizPresenterPort

logger = logging.getLogger("spotify_quiz.usecases.answer_question")


class AnswerQuestionUseCase:

    def __init__(self, presenter: QuizPresenterPort):
        self.presenter = presenter

    def execute(self, session: QuizSession, choice: str) -> bool:
        question = session.current_question
        correct = session.submit_answer(choice)
        logger.info(
            "Question %s/%s answered (correct=%s, score=%s)",
            session.question_number,
            session.total,
            correct,
            session.score,
        )
        self.presenter.show_feedback(correct, question.answer)
        return correct
