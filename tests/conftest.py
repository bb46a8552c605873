"""Pytest fixtures for quiz_engine tests."""

from __future__ import annotations

import pytest

from quiz_engine.core.options import QuizOptions
from quiz_engine.core.quiz_manager import QuizManager
from quiz_engine.core.services.quiz_timer import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(start=100.0)


@pytest.fixture
def make_quiz(clock: FakeClock):
    """Factory for quizzes driven by the fake clock."""

    def _make(time_limit: float | None = None, max_attempts: int = 0) -> QuizManager:
        return QuizManager(QuizOptions(time_limit=time_limit, max_attempts=max_attempts), clock=clock)

    return _make
