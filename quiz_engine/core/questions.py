"""Question types hosted by a quiz."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
import logging
import math
import re
from typing import TYPE_CHECKING, Any
import weakref

from quiz_engine.constants.quiz_constants import DEFAULT_LANGUAGES
from quiz_engine.core.events import QuestionRendered, Timeout
from quiz_engine.core.localization import find_language_entry
from quiz_engine.core.models import AttemptState, Grade, LockReason, Operator, VerificationResult
from quiz_engine.core.operators import operator_name_entries
from quiz_engine.core.options import (
    PyramidOptions,
    QuestionOptions,
    configure_pyramid,
    configure_question,
)
from quiz_engine.core.pyramid import PyramidGrid, RandomSource, award_points, generate_pyramid, verify
from quiz_engine.core.question_state import (
    SideEffect,
    Transition,
    apply_check,
    apply_lock,
    apply_timeout,
    can_check,
)
from quiz_engine.core.services.event_bus import EventBus

if TYPE_CHECKING:
    from quiz_engine.core.quiz_manager import QuizManager

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?", re.ASCII)


class Question:
    """Base question: owns its attempt state and reports changes to its quiz.

    Subclasses implement :meth:`grade`. The base question has nothing to fill
    in, so every check passes and awards no points.
    """

    def __init__(self, quiz: QuizManager | None = None, **options: Any) -> None:
        self._options = self.configure(options)
        self._state = AttemptState(max_attempts=self._options.max_attempts)
        self._quiz_ref = weakref.ref(quiz) if quiz is not None else None
        self.events = EventBus()

    @classmethod
    def configure(cls, options: dict[str, Any]) -> QuestionOptions:
        return configure_question(QuestionOptions(**options))

    # --- State ---

    @property
    def options(self) -> QuestionOptions:
        return self._options

    @property
    def state(self) -> AttemptState:
        return replace(self._state)

    @property
    def index(self) -> int | None:
        return self._options.index

    @property
    def optional(self) -> bool:
        return self._options.optional

    @property
    def max_attempts(self) -> int:
        return self._state.max_attempts

    @property
    def attempts_used(self) -> int:
        return self._state.attempts_used

    @property
    def locked(self) -> bool:
        return self._state.locked

    @property
    def lock_reason(self) -> LockReason:
        return self._state.lock_reason

    @property
    def editable(self) -> bool:
        return can_check(self._state)

    @property
    def max_points(self) -> int:
        return self._options.points

    @property
    def points(self) -> int:
        return self._state.awarded_points

    @property
    def correct_percentage(self) -> float:
        if self.max_points <= 0:
            return 0.0
        return self.points / self.max_points

    # --- Prompts ---

    @property
    def question_prompts(self) -> dict[str, str]:
        return {"default": "MISSING_QUESTION_PROMPT"}

    def prompt(self, languages: Sequence[str] | str = DEFAULT_LANGUAGES) -> str:
        return find_language_entry(languages, self.question_prompts)

    # --- Actions ---

    def grade(self) -> Grade:
        return Grade(passed=True, points=0)

    def check(self) -> bool:
        """Grade the current input as one attempt.

        Returns True when the attempt solved the question. Checks on a locked
        question or beyond the attempt budget are ignored and return False.
        """
        if not can_check(self._state):
            logger.debug("Ignoring check on question %s (locked=%s)", self.index, self._state.locked)
            return False
        grade = self.grade()
        self._apply(apply_check(self._state, grade))
        logger.debug(
            "Question %s checked: attempt %d, %d/%d points",
            self.index,
            self._state.attempts_used,
            self.points,
            self.max_points,
        )
        return grade.passed

    def on_timeout(self, event: Timeout | None = None) -> None:
        """Grade what has been entered so far and lock with ``TIMEOUT``."""
        if self._state.locked:
            return
        self._apply(apply_timeout(self._state, self.grade()))

    def lock(self, reason: LockReason = LockReason.NONE) -> None:
        self._apply(apply_lock(self._state, reason))

    def _apply(self, transition: Transition) -> None:
        if not transition.changed:
            return
        was_locked = self._state.locked
        self._state = transition.state
        if self._state.locked and not was_locked:
            logger.info(
                "Question %s locked (%s) with %d/%d points",
                self.index,
                self._state.lock_reason.value,
                self.points,
                self.max_points,
            )
        for effect in transition.effects:
            if effect is SideEffect.RENDER:
                self.events.emit(QuestionRendered(self))
            elif effect is SideEffect.NOTIFY_QUIZ:
                quiz = self._quiz_ref() if self._quiz_ref is not None else None
                if quiz is not None:
                    quiz.notify_question_change(self)


class NumberPyramidQuestion(Question):
    """Fill in a number pyramid derived from a row of random seeds."""

    def __init__(
        self,
        quiz: QuizManager | None = None,
        rng: RandomSource | None = None,
        **options: Any,
    ) -> None:
        super().__init__(quiz, **options)
        self._grid = generate_pyramid(
            self._options.size,
            self._options.min_num,
            self._options.max_num,
            self._options.operation,
            rng,
        )
        self._entries: dict[tuple[int, int], float] = {}
        self._last_result: VerificationResult | None = None

    @classmethod
    def configure(cls, options: dict[str, Any]) -> PyramidOptions:
        return configure_pyramid(PyramidOptions(**options))

    @property
    def grid(self) -> PyramidGrid:
        return self._grid

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def operator(self) -> Operator:
        return self._grid.operator

    @property
    def last_result(self) -> VerificationResult | None:
        return self._last_result

    @property
    def incorrect_cells(self) -> tuple[tuple[int, int], ...]:
        if self._last_result is None:
            return ()
        return self._last_result.incorrect_cells

    def entry(self, row: int, column: int) -> float | None:
        self._grid.cell(row, column)
        return self._entries.get((row, column))

    def enter_value(self, row: int, column: int, raw: str | float | None) -> bool:
        """Store a user-entered value for a derived cell.

        Seed cells are read-only and a locked question keeps its values; both
        cases are ignored and return False. Text that is not a number is stored
        as "no value".
        """
        cell = self._grid.cell(row, column)
        if cell.is_seed or self._state.locked:
            return False
        value = parse_cell_value(raw)
        if value is None:
            self._entries.pop((row, column), None)
        else:
            self._entries[(row, column)] = value
        logger.debug("Question %s cell (%d, %d) set to %r", self.index, row, column, value)
        return True

    def grade(self) -> Grade:
        result = verify(self._grid, self._entries)
        self._last_result = result
        return Grade(passed=result.all_correct, points=award_points(result, self.max_points))

    @property
    def question_prompts(self) -> dict[str, str]:
        names = operator_name_entries(self.operator)
        symbol = self.operator.value
        return {
            "default": "en",
            "en": f"Fill out the number pyramid using {names['en']} (`{symbol}`).",
            "de": f"Fülle die Zahlenpyramide mithilfe von {names['de']} (`{symbol}`) aus.",
        }


def parse_cell_value(raw: str | float | None) -> float | None:
    """Interpret raw input the way a numeric input field would.

    Integral values come back as ``int``; blank, non-numeric and non-finite
    input comes back as None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        number = raw
    else:
        text = str(raw).strip()
        if not text:
            return None
        if _NUMBER_PATTERN.fullmatch(text) is None:
            return None
        if "." not in text:
            return int(text)
        number = float(text)
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number
