"""Quiz controller: owns the top-items cache and the running session."""

import random
import threading
from typing import Optional

from spotify_quiz.config import QUIZ_LENGTH, TOP_ITEMS_LIMIT
from spotify_quiz.domain.errors import QuizStateError
from spotify_quiz.domain.model import QuizSession, TopItemsCache
from spotify_quiz.domain.ports import QuizPresenterPort, TemplateSourcePort, TopItemsSourcePort
from spotify_quiz.usecases.advance_question import AdvanceQuestionUseCase
from spotify_quiz.usecases.answer_question import AnswerQuestionUseCase
from spotify_quiz.usecases.load_top_items import LoadTopItemsUseCase
from spotify_quiz.usecases.start_quiz import StartQuizUseCase


class QuizController:
    """Entry point the UI talks to.

    Top items are loaded once per controller; every new quiz (including
    replays) is built from that same cache. Flet runs click handlers on a
    worker pool, so every call is serialized on one lock.
    """

    def __init__(
        self,
        top_items: TopItemsSourcePort,
        templates: TemplateSourcePort,
        presenter: QuizPresenterPort,
        rng: Optional[random.Random] = None,
        quiz_length: int = QUIZ_LENGTH,
        items_limit: int = TOP_ITEMS_LIMIT,
    ):
        rng = rng or random.Random()
        self.cache = TopItemsCache()
        self.session: Optional[QuizSession] = None
        self._lock = threading.Lock()

        self.load_uc = LoadTopItemsUseCase(top_items, limit=items_limit)
        self.start_uc = StartQuizUseCase(templates, presenter, rng=rng, quiz_length=quiz_length)
        self.answer_uc = AnswerQuestionUseCase(presenter)
        self.advance_uc = AdvanceQuestionUseCase(presenter, rng=rng)

    def start(self) -> QuizSession:
        with self._lock:
            return self._start()

    def restart(self) -> QuizSession:
        with self._lock:
            if not self.cache.is_loaded:
                raise QuizStateError("Cannot replay before the first quiz has loaded")
            return self._start()

    def submit_answer(self, choice: str) -> bool:
        with self._lock:
            return self.answer_uc.execute(self._active_session(), choice)

    def advance(self, from_number: Optional[int] = None) -> bool:
        with self._lock:
            return self.advance_uc.execute(self._active_session(), from_number)

    def _start(self) -> QuizSession:
        if not self.cache.is_loaded:
            self.load_uc.execute(self.cache)
        self.session = self.start_uc.execute(self.cache)
        return self.session

    def _active_session(self) -> QuizSession:
        if self.session is None:
            raise QuizStateError("Quiz has not been started")
        return self.session
