"""Domain models for the quiz engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operator(str, Enum):
    """Arithmetic operator used to derive pyramid cells."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"  # integer division
    MODULO = "%"


class LockReason(str, Enum):
    """Cause that ended the editable lifecycle of a question."""

    NONE = "none"
    COMPLETE = "complete"
    TIMEOUT = "timeout"
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"


@dataclass(frozen=True, slots=True)
class PyramidCell:
    """Single pyramid value; row 0 holds the randomly drawn seeds."""

    row: int
    column: int
    value: int
    is_seed: bool = False


@dataclass(slots=True)
class AttemptState:
    """Per-question attempt bookkeeping."""

    attempts_used: int = 0
    max_attempts: int = 0  # 0 = unlimited
    locked: bool = False
    lock_reason: LockReason = LockReason.NONE
    awarded_points: int = 0

    @property
    def attempts_exhausted(self) -> bool:
        return self.max_attempts > 0 and self.attempts_used >= self.max_attempts


@dataclass(frozen=True, slots=True)
class Grade:
    """Outcome of grading a question's current input."""

    passed: bool
    points: int


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Comparison of submitted pyramid values against the derived ones."""

    all_correct: bool
    correct_count: int
    total_count: int
    incorrect_cells: tuple[tuple[int, int], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class QuizResults:
    """Immutable snapshot of the quiz-wide aggregates."""

    points: int
    max_points: int
    correct_percentage: float
