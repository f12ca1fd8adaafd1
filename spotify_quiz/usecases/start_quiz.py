"""Use case: build a new quiz from random templates and show the first question."""

import logging
import random
from typing import Optional

from spotify_quiz.config import QUIZ_LENGTH
from spotify_quiz.domain.errors import TemplatePoolExhaustedError
from spotify_quiz.domain.model import Question, QuestionTemplate, QuizSession, TopItemsCache
from spotify_quiz.domain.ports import QuizPresenterPort, TemplateSourcePort

logger = logging.getLogger("spotify_quiz.usecases.start_quiz")


def sample_templates(
    templates: list[QuestionTemplate],
    count: int,
    rng: random.Random,
) -> list[QuestionTemplate]:
    """Pick ``count`` templates uniformly, without replacement."""
    if len(templates) < count:
        raise TemplatePoolExhaustedError(
            f"{count} question templates are needed, only {len(templates)} available"
        )
    return rng.sample(templates, count)


class StartQuizUseCase:

    def __init__(
        self,
        templates: TemplateSourcePort,
        presenter: QuizPresenterPort,
        rng: Optional[random.Random] = None,
        quiz_length: int = QUIZ_LENGTH,
    ):
        self.templates = templates
        self.presenter = presenter
        self.rng = rng or random.Random()
        self.quiz_length = quiz_length

    def execute(self, cache: TopItemsCache) -> QuizSession:
        pool = self.templates.load_templates()
        chosen = sample_templates(pool, self.quiz_length, self.rng)
        questions = [Question.from_template(t, cache, self.rng) for t in chosen]

        session = QuizSession()
        session.start(questions)
        logger.info("Quiz started (questions=%s, template_pool=%s)", session.total, len(pool))

        question = session.current_question
        self.presenter.show_question(
            question.text,
            session.question_number,
            session.total,
            question.shuffled_choices(self.rng),
        )
        return session
