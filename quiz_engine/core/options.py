"""Construction-time options for quizzes and questions.

Options are normalized once when a quiz or question is created. Out-of-range
values fall back to safe defaults instead of raising; reconfiguring after
construction is not supported.
"""

from __future__ import annotations

from dataclasses import dataclass

from quiz_engine.constants.quiz_constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_NUM,
    DEFAULT_MIN_NUM,
    DEFAULT_OPERATOR,
    DEFAULT_POINTS,
    DEFAULT_PYRAMID_SIZE,
)
from quiz_engine.core.models import Operator
from quiz_engine.core.operators import parse_operator


@dataclass(frozen=True, slots=True)
class QuizOptions:
    time_limit: float | None = None  # seconds
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


@dataclass(frozen=True, slots=True)
class QuestionOptions:
    index: int | None = None
    points: int = DEFAULT_POINTS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    optional: bool = False


@dataclass(frozen=True, slots=True)
class PyramidOptions(QuestionOptions):
    size: int = DEFAULT_PYRAMID_SIZE
    max_num: int | None = DEFAULT_MAX_NUM
    min_num: int | None = DEFAULT_MIN_NUM
    operation: Operator | str = DEFAULT_OPERATOR


def configure_quiz(options: QuizOptions) -> QuizOptions:
    return QuizOptions(
        time_limit=_normalize_time_limit(options.time_limit),
        max_attempts=_non_negative(options.max_attempts),
    )


def configure_question(options: QuestionOptions) -> QuestionOptions:
    return QuestionOptions(
        index=_normalize_index(options.index),
        points=_non_negative(options.points),
        max_attempts=_non_negative(options.max_attempts),
        optional=bool(options.optional),
    )


def configure_pyramid(options: PyramidOptions) -> PyramidOptions:
    base = configure_question(options)
    min_num = DEFAULT_MIN_NUM if options.min_num is None else int(options.min_num)
    max_num = DEFAULT_MAX_NUM if options.max_num is None else int(options.max_num)
    if min_num > max_num:
        min_num, max_num = max_num, min_num
    return PyramidOptions(
        index=base.index,
        points=base.points,
        max_attempts=base.max_attempts,
        optional=base.optional,
        size=_non_negative(options.size),
        max_num=max_num,
        min_num=min_num,
        operation=parse_operator(options.operation),
    )


def _non_negative(value: int | None) -> int:
    if value is None:
        return 0
    return max(0, int(value))


def _normalize_index(index: int | None) -> int | None:
    if index is None or index <= 0:
        return None
    return int(index)


def _normalize_time_limit(time_limit: float | None) -> float | None:
    if time_limit is None or time_limit <= 0:
        return None
    return float(time_limit)
