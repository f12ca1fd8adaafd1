"""Use case: move to the next question or finish the quiz."""

import logging
import random
from typing import Optional

from spotify_quiz.domain.model import QuizSession
from spotify_quiz.domain.ports import QuizPresenterPort

logger = logging.getLogger("spotify_quiz.usecases.advance_question")


class AdvanceQuestionUseCase:

    def __init__(self, presenter: QuizPresenterPort, rng: Optional[random.Random] = None):
        self.presenter = presenter
        self.rng = rng or random.Random()

    def execute(self, session: QuizSession, from_number: Optional[int] = None) -> bool:
        if session.advance(from_number):
            question = session.current_question
            self.presenter.show_question(
                question.text,
                session.question_number,
                session.total,
                question.shuffled_choices(self.rng),
            )
            return True

        logger.info("Quiz finished (score=%s/%s)", session.score, session.total)
        self.presenter.show_results(session.score, session.total)
        return False
