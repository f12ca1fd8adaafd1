"""Bounded context: Quiz flow

The controller builds the quiz from cached top items and drives the presenter.
"""

import random
import threading

import pytest

from conftest import InMemoryTemplateSource, InMemoryTopItemsSource, make_templates
from spotify_quiz.domain.errors import DataLoadError, QuizStateError, TemplatePoolExhaustedError
from spotify_quiz.services.quiz_controller import QuizController
from spotify_quiz.usecases.start_quiz import StartQuizUseCase, sample_templates


def _controller(presenter, source=None, templates=None, seed=7, quiz_length=10):
    return QuizController(
        top_items=source or InMemoryTopItemsSource(),
        templates=templates or InMemoryTemplateSource(make_templates(14)),
        presenter=presenter,
        rng=random.Random(seed),
        quiz_length=quiz_length,
    )


class TestTemplateSampling:
    """Ten distinct templates are drawn from the pool for every quiz."""

    def test_sampled_templates_are_distinct(self, rng):
        pool = make_templates(14)

        for _ in range(50):
            chosen = sample_templates(pool, 10, rng)
            assert len(chosen) == 10
            assert len({t.question for t in chosen}) == 10

    def test_whole_pool_is_used_when_exactly_large_enough(self, rng):
        pool = make_templates(10)

        chosen = sample_templates(pool, 10, rng)

        assert sorted(t.question for t in chosen) == sorted(t.question for t in pool)

    def test_small_pool_is_a_hard_failure(self, rng):
        with pytest.raises(TemplatePoolExhaustedError):
            sample_templates(make_templates(9), 10, rng)


class TestStartQuiz:
    """Starting loads the listening history once and shows question 1."""

    def test_start_shows_the_first_question(self, presenter):
        controller = _controller(presenter)

        session = controller.start()

        assert session.total == 10
        assert len(presenter.questions) == 1
        text, number, total, choices = presenter.questions[0]
        assert number == 1
        assert total == 10
        assert text == session.current_question.text
        assert sorted(choices) == sorted(session.current_question.choices)

    def test_start_fetches_all_six_top_item_lists(self, presenter):
        source = InMemoryTopItemsSource()
        controller = _controller(presenter, source=source)

        controller.start()

        assert sorted(source.calls) == sorted([
            (c, 20, w)
            for c in ("tracks", "artists")
            for w in ("short_term", "medium_term", "long_term")
        ])

    def test_quiz_uses_ten_distinct_templates(self, presenter):
        session = _controller(presenter).start()

        assert len({q.text for q in session.questions}) == 10

    def test_failed_fetch_aborts_the_start(self, presenter):
        controller = _controller(presenter, source=InMemoryTopItemsSource(fail_on=("artists", "long_term")))

        with pytest.raises(DataLoadError):
            controller.start()

        assert presenter.questions == []
        assert controller.session is None

    def test_small_template_pool_aborts_the_start(self, presenter):
        controller = _controller(presenter, templates=InMemoryTemplateSource(make_templates(4)))

        with pytest.raises(TemplatePoolExhaustedError):
            controller.start()
        assert presenter.questions == []

    def test_use_case_honours_a_custom_length(self, presenter, cache, template_source, rng):
        session = StartQuizUseCase(template_source, presenter, rng=rng, quiz_length=3).execute(cache)

        assert session.total == 3


class TestAnswerAndAdvance:
    """Feedback is shown before the user moves on."""

    def test_correct_answer_is_reported_to_the_presenter(self, presenter):
        controller = _controller(presenter)
        session = controller.start()

        assert controller.submit_answer(session.current_question.answer) is True
        assert presenter.feedback == [(True, session.current_question.answer)]
        assert session.question_number == 1

    def test_wrong_answer_reports_the_correct_one(self, presenter):
        controller = _controller(presenter)
        session = controller.start()
        question = session.current_question

        controller.submit_answer(question.choices[1])

        assert presenter.feedback == [(False, question.answer)]

    def test_answering_twice_is_rejected(self, presenter):
        controller = _controller(presenter)
        session = controller.start()
        controller.submit_answer(session.current_question.answer)

        with pytest.raises(QuizStateError):
            controller.submit_answer(session.current_question.answer)
        assert session.score == 1

    def test_advance_shows_the_next_question(self, presenter):
        controller = _controller(presenter)
        controller.start()

        assert controller.advance() is True
        assert presenter.questions[-1][1] == 2

    def test_last_advance_shows_results(self, presenter):
        controller = _controller(presenter)
        session = controller.start()

        for _ in range(10):
            controller.submit_answer(session.current_question.answer)
            controller.advance()

        assert session.is_finished
        assert presenter.results == [(10, 10)]

    def test_actions_before_start_are_rejected(self, presenter):
        controller = _controller(presenter)

        with pytest.raises(QuizStateError):
            controller.submit_answer("x")
        with pytest.raises(QuizStateError):
            controller.advance()

    def test_stale_next_click_does_not_skip_a_question(self, presenter):
        controller = _controller(presenter)
        controller.start()

        controller.advance(from_number=1)
        with pytest.raises(QuizStateError):
            controller.advance(from_number=1)

        assert [q[1] for q in presenter.questions] == [1, 2]

    def test_simultaneous_answers_show_feedback_once(self, presenter):
        controller = _controller(presenter)
        session = controller.start()
        answer = session.current_question.answer
        barrier = threading.Barrier(2)
        rejected = []

        def click():
            barrier.wait()
            try:
                controller.submit_answer(answer)
            except QuizStateError as error:
                rejected.append(error)

        threads = [threading.Thread(target=click) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert session.score == 1
        assert len(presenter.feedback) == 1
        assert len(rejected) == 1


class TestPlayAgain:
    """Replaying reuses the loaded listening history."""

    def test_restart_does_not_refetch_top_items(self, presenter):
        source = InMemoryTopItemsSource()
        templates = InMemoryTemplateSource(make_templates(14))
        controller = _controller(presenter, source=source, templates=templates)
        first = controller.start()

        second = controller.restart()

        assert len(source.calls) == 6
        assert templates.loads == 2
        assert second is not first
        assert second.question_number == 1
        assert second.score == 0

    def test_restart_before_first_load_is_rejected(self, presenter):
        with pytest.raises(QuizStateError):
            _controller(presenter).restart()
