"""Tests for quiz orchestration: registration, timer and aggregates."""

from __future__ import annotations

import gc

import pytest

from quiz_engine.core.events import ResultsChange, TimerUpdate, Timeout
from quiz_engine.core.models import LockReason, QuizResults
from quiz_engine.core.options import QuizOptions
from quiz_engine.core.questions import NumberPyramidQuestion, Question
from quiz_engine.core.quiz_manager import QuizManager
from testing_utils import fill, make_pyramid


class Recorder:
    def __init__(self) -> None:
        self.events: list[object] = []

    def __call__(self, event: object) -> None:
        self.events.append(event)


def test_add_question_assigns_defaults(make_quiz) -> None:
    quiz = make_quiz(max_attempts=3)

    first = quiz.add_question(NumberPyramidQuestion)
    second = quiz.add_question(NumberPyramidQuestion, points=5, max_attempts=0)

    assert (first.index, second.index) == (1, 2)
    assert first.max_points == 1
    assert first.max_attempts == 3
    assert second.max_points == 5
    assert second.max_attempts == 0
    assert quiz.questions == (first, second)


def test_add_question_rejects_non_question_types(make_quiz) -> None:
    quiz = make_quiz()

    with pytest.raises(TypeError):
        quiz.add_question(dict)


def test_add_question_broadcasts_results(make_quiz) -> None:
    quiz = make_quiz()
    recorder = Recorder()
    quiz.on(ResultsChange, recorder)

    quiz.add_question(NumberPyramidQuestion, points=2)

    assert recorder.events[-1] == ResultsChange(QuizResults(points=0, max_points=2, correct_percentage=0.0))


def test_tick_reports_elapsed_and_remaining(make_quiz, clock) -> None:
    quiz = make_quiz(time_limit=10)
    recorder = Recorder()
    quiz.on(TimerUpdate, recorder)

    clock.advance(3)
    quiz.tick()

    assert recorder.events == [TimerUpdate(elapsed=3.0, remaining=7.0)]


def test_tick_without_limit_never_times_out(make_quiz, clock) -> None:
    quiz = make_quiz()
    updates = Recorder()
    timeouts = Recorder()
    quiz.on(TimerUpdate, updates)
    quiz.on(Timeout, timeouts)

    clock.advance(10_000)
    quiz.tick()

    assert updates.events == [TimerUpdate(elapsed=10_000.0, remaining=None)]
    assert timeouts.events == []
    assert quiz.time_limit is None


def test_non_positive_time_limit_means_unlimited(clock) -> None:
    quiz = QuizManager(QuizOptions(time_limit=0), clock=clock)

    assert quiz.time_limit is None
    assert quiz.remaining is None


def test_timeout_locks_unanswered_questions(make_quiz, clock) -> None:
    quiz = make_quiz(time_limit=1)
    question = make_pyramid([2, 3, 4], quiz=quiz)
    timeouts = Recorder()
    quiz.on(Timeout, timeouts)

    clock.advance(0.5)
    quiz.tick()
    assert not question.locked

    clock.advance(0.5)
    quiz.tick()

    assert quiz.timed_out
    assert question.lock_reason is LockReason.TIMEOUT
    assert question.points == 0
    assert len(timeouts.events) == 1

    clock.advance(5)
    quiz.tick()
    assert len(timeouts.events) == 1


def test_timeout_grades_partial_values(make_quiz, clock) -> None:
    quiz = make_quiz(time_limit=1)
    question = make_pyramid([2, 3, 4], quiz=quiz, points=3)
    fill(question, [[5, 7]])

    clock.advance(1)
    quiz.tick()

    assert question.lock_reason is LockReason.TIMEOUT
    assert question.points == 2
    assert quiz.points == 2


def test_timeout_wins_over_correct_unchecked_input(make_quiz, clock) -> None:
    quiz = make_quiz(time_limit=1)
    question = make_pyramid([2, 3, 4], quiz=quiz)
    fill(question, [[5, 7], [12]])

    clock.advance(2)
    quiz.tick()
    question.check()

    assert question.lock_reason is LockReason.TIMEOUT
    assert question.points == 1
    assert question.attempts_used == 0


def test_completed_question_keeps_reason_after_timeout(make_quiz, clock) -> None:
    quiz = make_quiz(time_limit=1)
    question = make_pyramid([2, 3, 4], quiz=quiz)
    fill(question, [[5, 7], [12]])
    question.check()

    clock.advance(1)
    quiz.tick()

    assert question.lock_reason is LockReason.COMPLETE


def test_timeout_results_broadcast_after_fan_out(make_quiz, clock) -> None:
    quiz = make_quiz(time_limit=1)
    make_pyramid([2, 3, 4], quiz=quiz)
    order: list[str] = []
    quiz.on(Timeout, lambda event: order.append("timeout"))
    quiz.on(ResultsChange, lambda event: order.append("results"))

    clock.advance(1)
    quiz.tick()

    assert "timeout" in order
    assert order[-1] == "results"


def test_aggregate_over_non_optional_questions(make_quiz) -> None:
    quiz = make_quiz()
    solved = make_pyramid([2, 3, 4], quiz=quiz)
    half = make_pyramid([1, 1], quiz=quiz)
    fill(solved, [[5, 7], [12]])
    fill(half, [[3]])

    solved.check()
    half.check()

    assert quiz.points == 1
    assert quiz.max_points == 2
    assert quiz.correct_percentage == pytest.approx(0.5)


def test_optional_questions_only_add_bonus_points(make_quiz) -> None:
    quiz = make_quiz()
    required = make_pyramid([1, 2], quiz=quiz, points=2)
    bonus = make_pyramid([1, 2], quiz=quiz, points=3, optional=True)
    fill(required, [[3]])
    fill(bonus, [[3]])

    required.check()
    bonus.check()

    assert quiz.points == 5
    assert quiz.max_points == 2
    assert quiz.correct_percentage == 1.0


def test_correct_percentage_without_graded_questions_is_zero(make_quiz) -> None:
    quiz = make_quiz()
    assert quiz.correct_percentage == 0.0

    quiz.add_question(NumberPyramidQuestion, optional=True)
    assert quiz.correct_percentage == 0.0
    assert quiz.results == QuizResults(points=0, max_points=0, correct_percentage=0.0)


def test_question_changes_rebroadcast_results(make_quiz) -> None:
    quiz = make_quiz()
    question = make_pyramid([1, 2], quiz=quiz)
    recorder = Recorder()
    quiz.on(ResultsChange, recorder)

    fill(question, [[3]])
    question.check()
    quiz.notify_question_change(question)
    quiz.notify_question_change(question)

    assert recorder.events
    assert all(event.results.points == 1 for event in recorder.events)


def test_off_stops_delivery(make_quiz, clock) -> None:
    quiz = make_quiz()
    recorder = Recorder()
    quiz.on(TimerUpdate, recorder)
    quiz.off(TimerUpdate, recorder)

    quiz.tick()

    assert recorder.events == []


def test_question_outlives_quiz_without_error() -> None:
    quiz = QuizManager()
    question = quiz.add_question(Question)
    del quiz
    gc.collect()

    assert question.check() is True
