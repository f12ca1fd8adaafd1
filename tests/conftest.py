"""Shared in-memory adapters and fixtures for all bounded contexts."""

import random
import threading
from typing import Optional

import pytest

from spotify_quiz.domain.model import CATEGORIES, TIME_WINDOWS, QuestionTemplate, TopItem, TopItemsCache
from spotify_quiz.domain.ports import TemplateSourcePort, TopItemsSourcePort


# ── In-memory adapters ──────────────────────────────────────────────


def make_items(prefix: str, count: int) -> list[TopItem]:
    return [TopItem(id=f"{prefix}-{i}", name=f"{prefix} {i}") for i in range(count)]


class InMemoryTopItemsSource(TopItemsSourcePort):
    def __init__(self, items: Optional[dict[tuple[str, str], list[TopItem]]] = None, fail_on: Optional[tuple[str, str]] = None):
        self._items = items or {
            (c, w): make_items(f"{c}-{w}", 20) for c in CATEGORIES for w in TIME_WINDOWS
        }
        self.fail_on = fail_on
        self.calls: list[tuple[str, int, str]] = []
        self._lock = threading.Lock()

    def fetch_top_items(self, category: str, limit: int, window: str) -> list[TopItem]:
        with self._lock:
            self.calls.append((category, limit, window))
        if self.fail_on == (category, window):
            raise ConnectionError(f"Spotify unavailable for {category}/{window}")
        return list(self._items.get((category, window), []))[:limit]


class InMemoryTemplateSource(TemplateSourcePort):
    def __init__(self, templates: list[QuestionTemplate]):
        self.templates = templates
        self.loads = 0

    def load_templates(self) -> list[QuestionTemplate]:
        self.loads += 1
        return list(self.templates)


class RecordingPresenter:
    def __init__(self):
        self.questions: list[tuple[str, int, int, list[str]]] = []
        self.feedback: list[tuple[bool, str]] = []
        self.results: list[tuple[int, int]] = []

    def show_question(self, text: str, number: int, total: int, choices: list[str]) -> None:
        self.questions.append((text, number, total, list(choices)))

    def show_feedback(self, correct: bool, answer: str) -> None:
        self.feedback.append((correct, answer))

    def show_results(self, score: int, total: int) -> None:
        self.results.append((score, total))


class FakeSecretStore:
    def __init__(self, available: bool = True):
        self.available = available
        self.data: dict[str, str] = {}

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        if not self.available:
            return False
        if value:
            self.data[key] = value
        else:
            self.data.pop(key, None)
        return True


def make_templates(count: int) -> list[QuestionTemplate]:
    templates = []
    for i in range(count):
        category = CATEGORIES[i % len(CATEGORIES)]
        window = TIME_WINDOWS[i % len(TIME_WINDOWS)]
        templates.append(QuestionTemplate(question=f"Question {i}?", category=category, window=window))
    return templates


def filled_cache(source: Optional[InMemoryTopItemsSource] = None) -> TopItemsCache:
    source = source or InMemoryTopItemsSource()
    cache = TopItemsCache()
    cache.fill({
        (c, w): source.fetch_top_items(c, 20, w) for c in CATEGORIES for w in TIME_WINDOWS
    })
    return cache


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def top_items_source():
    return InMemoryTopItemsSource()


@pytest.fixture
def cache(top_items_source):
    return filled_cache(top_items_source)


@pytest.fixture
def template_source():
    return InMemoryTemplateSource(make_templates(14))


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def secret_store():
    return FakeSecretStore()
