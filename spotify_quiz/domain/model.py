"""Pure domain objects: no framework dependency."""

import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from spotify_quiz.domain.errors import (
    AlreadyAnsweredError,
    InsufficientItemsError,
    InvalidTemplateError,
    QuizStateError,
)

CATEGORIES = ("tracks", "artists")
TIME_WINDOWS = ("short_term", "medium_term", "long_term")
CHOICES_PER_QUESTION = 4


@dataclass
class TopItem:
    id: str
    name: str


class TopItemsCache:
    """Top tracks and artists per time window, filled once per session."""

    def __init__(self):
        self._items: dict[tuple[str, str], list[TopItem]] = {}
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def fill(self, items: dict[tuple[str, str], list[TopItem]]) -> None:
        if self._loaded:
            raise QuizStateError("Top items are already loaded")
        missing = [
            key for key in ((c, w) for c in CATEGORIES for w in TIME_WINDOWS)
            if key not in items
        ]
        if missing:
            raise QuizStateError(f"Top items missing for {missing}")
        self._items = {key: list(value) for key, value in items.items()}
        self._loaded = True

    def items(self, category: str, window: str) -> list[TopItem]:
        if not self._loaded:
            raise QuizStateError("Top items have not been loaded yet")
        try:
            return list(self._items[(category, window)])
        except KeyError:
            raise QuizStateError(f"Unknown top items list: {category}/{window}") from None

    def count(self, category: str, window: str) -> int:
        return len(self.items(category, window))


@dataclass(frozen=True)
class QuestionTemplate:
    question: str
    category: str
    window: str
    answer_index: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "QuestionTemplate":
        if not isinstance(data, dict):
            raise InvalidTemplateError(f"Template must be an object, got {type(data).__name__}")
        text = data.get("question")
        if not isinstance(text, str) or not text.strip():
            raise InvalidTemplateError("Template has no question text")
        category = data.get("type")
        if category not in CATEGORIES:
            raise InvalidTemplateError(f"Unknown template type: {category!r}")
        window = data.get("timePeriod")
        if window not in TIME_WINDOWS:
            raise InvalidTemplateError(f"Unknown template time period: {window!r}")
        answer_index = data.get("answerIndex")
        if answer_index is not None:
            # bool is an int subclass
            if isinstance(answer_index, bool) or not isinstance(answer_index, int) or answer_index < 0:
                raise InvalidTemplateError(f"Invalid answerIndex: {answer_index!r}")
        return cls(question=text, category=category, window=window, answer_index=answer_index)


@dataclass(frozen=True)
class Question:
    text: str
    category: str
    window: str
    answer_index: int
    answer: str
    choices: tuple[str, ...]

    @classmethod
    def from_template(
        cls,
        template: QuestionTemplate,
        cache: TopItemsCache,
        rng: Optional[random.Random] = None,
    ) -> "Question":
        """Personalize a template with the answer and its three distractors.

        The choices are the items at four consecutive ranks starting at the
        answer index, so the answer is always among them. Without a fixed
        index one is drawn uniformly from ``[0, count - 3)``.
        """
        rng = rng or random.Random()
        items = cache.items(template.category, template.window)
        count = len(items)
        if count < CHOICES_PER_QUESTION:
            raise InsufficientItemsError(
                f"{template.category}/{template.window} has {count} items, "
                f"{CHOICES_PER_QUESTION} are needed"
            )

        index = template.answer_index
        if index is None:
            index = rng.randrange(count - (CHOICES_PER_QUESTION - 1))
        elif index + CHOICES_PER_QUESTION > count:
            raise InsufficientItemsError(
                f"answerIndex {index} needs {CHOICES_PER_QUESTION} items from rank {index}, "
                f"{template.category}/{template.window} has {count}"
            )

        window_items = items[index:index + CHOICES_PER_QUESTION]
        return cls(
            text=template.question,
            category=template.category,
            window=template.window,
            answer_index=index,
            answer=window_items[0].name,
            choices=tuple(item.name for item in window_items),
        )

    def is_correct(self, candidate: str) -> bool:
        return candidate == self.answer

    def shuffled_choices(self, rng: Optional[random.Random] = None) -> list[str]:
        choices = list(self.choices)
        (rng or random.Random()).shuffle(choices)
        return choices


class QuizState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class QuizSession:
    questions: list[Question] = field(default_factory=list)
    current_index: int = 0
    score: int = 0
    state: QuizState = QuizState.NOT_STARTED
    answers: dict[int, str] = field(default_factory=dict)
    # UI events may arrive on several worker threads at once
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def question_number(self) -> int:
        return self.current_index + 1

    @property
    def is_finished(self) -> bool:
        return self.state is QuizState.FINISHED

    @property
    def current_question(self) -> Question:
        self._require_in_progress()
        return self.questions[self.current_index]

    def is_answered(self, index: Optional[int] = None) -> bool:
        return (self.current_index if index is None else index) in self.answers

    def start(self, questions: list[Question]) -> None:
        with self._lock:
            if self.state is not QuizState.NOT_STARTED:
                raise QuizStateError(f"Quiz cannot start from state {self.state.value}")
            if not questions:
                raise QuizStateError("Quiz needs at least one question")
            self.questions = list(questions)
            self.current_index = 0
            self.score = 0
            self.answers = {}
            self.state = QuizState.IN_PROGRESS

    def submit_answer(self, choice: str) -> bool:
        with self._lock:
            self._require_in_progress()
            if self.is_answered():
                raise AlreadyAnsweredError(f"Question {self.question_number} was already answered")
            correct = self.questions[self.current_index].is_correct(choice)
            self.answers[self.current_index] = choice
            if correct:
                self.score += 1
            return correct

    def advance(self, from_number: Optional[int] = None) -> bool:
        """Move to the next question. Returns False once the quiz is finished.

        ``from_number`` pins the question the user was looking at; a repeated
        "next" for a question already left is rejected instead of skipping one.
        """
        with self._lock:
            self._require_in_progress()
            if from_number is not None and from_number != self.question_number:
                raise QuizStateError(
                    f"Question {from_number} was already left, now on {self.question_number}"
                )
            if self.current_index < self.total - 1:
                self.current_index += 1
                return True
            self.state = QuizState.FINISHED
            return False

    def _require_in_progress(self) -> None:
        if self.state is not QuizState.IN_PROGRESS:
            raise QuizStateError(f"Quiz is {self.state.value.replace('_', ' ')}")
