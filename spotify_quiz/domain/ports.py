"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod
from typing import Protocol

from spotify_quiz.domain.model import QuestionTemplate, TopItem


class TopItemsSourcePort(ABC):
    @abstractmethod
    def fetch_top_items(self, category: str, limit: int, window: str) -> list[TopItem]:
        ...


class TemplateSourcePort(ABC):
    @abstractmethod
    def load_templates(self) -> list[QuestionTemplate]:
        ...


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, cfg: dict) -> None:
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        ...


class QuizPresenterPort(Protocol):
    """Rendering side of the quiz, implemented by the UI."""

    def show_question(self, text: str, number: int, total: int, choices: list[str]) -> None:
        ...

    def show_feedback(self, correct: bool, answer: str) -> None:
        ...

    def show_results(self, score: int, total: int) -> None:
        ...
