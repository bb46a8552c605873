"""Event payloads published by the quiz and its questions.

Each class is its own channel on an :class:`~quiz_engine.core.services.event_bus.EventBus`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quiz_engine.core.models import QuizResults

if TYPE_CHECKING:
    from quiz_engine.core.questions import Question


@dataclass(frozen=True, slots=True)
class TimerUpdate:
    """Emitted on every tick. ``remaining`` is ``None`` without a time limit."""

    elapsed: float
    remaining: float | None = None


@dataclass(frozen=True, slots=True)
class Timeout:
    """Emitted once when the quiz time limit runs out."""


@dataclass(frozen=True, slots=True)
class ResultsChange:
    results: QuizResults


@dataclass(frozen=True, slots=True)
class QuestionRendered:
    """Render intent: the question's visible state may have changed."""

    question: Question
