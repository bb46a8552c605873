"""Quiz orchestration: questions, timer and score aggregation."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any, TypeVar

from quiz_engine.core.events import ResultsChange, TimerUpdate, Timeout
from quiz_engine.core.models import QuizResults
from quiz_engine.core.options import QuizOptions, configure_quiz
from quiz_engine.core.questions import Question
from quiz_engine.core.services.event_bus import EventBus
from quiz_engine.core.services.quiz_timer import Clock, QuizTimer

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=Question)
E = TypeVar("E")


class QuizManager:
    """Hosts an ordered set of questions and publishes quiz-wide events.

    The host calls :meth:`tick` periodically. Questions report state changes
    through :meth:`notify_question_change`; the manager never drives them
    except by broadcasting :class:`Timeout`.
    """

    def __init__(
        self,
        options: QuizOptions | None = None,
        clock: Clock | None = None,
        events: EventBus | None = None,
    ) -> None:
        self._options = configure_quiz(options or QuizOptions())
        self._timer = QuizTimer(self._options.time_limit, clock)
        self._events = events if events is not None else EventBus()
        self._questions: list[Question] = []
        self._update_results()

    # --- Configuration ---

    @property
    def time_limit(self) -> float | None:
        return self._timer.time_limit

    @property
    def max_attempts(self) -> int:
        return self._options.max_attempts

    # --- Questions ---

    def add_question(self, question_type: type[Q], **options: Any) -> Q:
        """Create, register and subscribe a question.

        The question gets the next 1-based index, the quiz's attempt budget and
        a weight of one point unless ``options`` say otherwise.
        """
        if not (isinstance(question_type, type) and issubclass(question_type, Question)):
            raise TypeError(f"{question_type!r} is not a Question type")
        merged: dict[str, Any] = {
            "index": len(self._questions) + 1,
            "points": 1,
            "max_attempts": self._options.max_attempts,
        }
        merged.update(options)
        question = question_type(quiz=self, **merged)
        self._questions.append(question)
        self._events.on(Timeout, question.on_timeout)
        logger.debug("Added %s as question %s", question_type.__name__, question.index)
        self._update_results()
        return question

    @property
    def questions(self) -> tuple[Question, ...]:
        return tuple(self._questions)

    def notify_question_change(self, question: Question) -> None:
        self._update_results()

    # --- Timer ---

    @property
    def elapsed(self) -> float:
        return self._timer.elapsed()

    @property
    def remaining(self) -> float | None:
        return self._timer.remaining()

    @property
    def timed_out(self) -> bool:
        return self._timer.timed_out

    def tick(self) -> None:
        """Publish the timer state and fire the timeout once the limit is reached."""
        self._events.emit(TimerUpdate(elapsed=self._timer.elapsed(), remaining=self._timer.remaining()))
        if self._timer.expire_if_due():
            logger.info("Quiz time limit of %ss reached", self._timer.time_limit)
            self._events.emit(Timeout())
            self._update_results()

    # --- Results ---

    @property
    def points(self) -> int:
        return sum(question.points for question in self._questions)

    @property
    def max_points(self) -> int:
        return sum(question.max_points for question in self._questions if not question.optional)

    @property
    def correct_percentage(self) -> float:
        graded = [question for question in self._questions if not question.optional]
        if not graded:
            return 0.0
        return sum(question.correct_percentage for question in graded) / len(graded)

    @property
    def results(self) -> QuizResults:
        return QuizResults(
            points=self.points,
            max_points=self.max_points,
            correct_percentage=self.correct_percentage,
        )

    def _update_results(self) -> None:
        self._events.emit(ResultsChange(self.results))

    # --- Subscriptions ---

    def on(self, channel: type[E], listener: Callable[[E], None]) -> None:
        self._events.on(channel, listener)

    def off(self, channel: type[E], listener: Callable[[E], None]) -> None:
        self._events.off(channel, listener)
