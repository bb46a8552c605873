"""Pure attempt-lifecycle transitions for a question.

A question is editable until it locks for one of three reasons: it was solved
(``COMPLETE``), the quiz ran out of time (``TIMEOUT``) or its attempt budget ran
out (``ATTEMPTS_EXHAUSTED``). Locking happens once; later lock requests, checks
and timeouts leave the state untouched.

Every function returns a :class:`Transition` with the new state and the side
effects its owner should apply. The input state is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto

from quiz_engine.core.models import AttemptState, Grade, LockReason


class SideEffect(Enum):
    RENDER = auto()
    NOTIFY_QUIZ = auto()


_ON_CHANGE = (SideEffect.RENDER, SideEffect.NOTIFY_QUIZ)


@dataclass(frozen=True, slots=True)
class Transition:
    state: AttemptState
    effects: tuple[SideEffect, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.effects)


def can_check(state: AttemptState) -> bool:
    return not state.locked and not state.attempts_exhausted


def apply_check(state: AttemptState, grade: Grade) -> Transition:
    """Record one graded attempt, locking when solved or out of attempts."""
    if not can_check(state):
        return Transition(state)
    checked = replace(state, attempts_used=state.attempts_used + 1, awarded_points=grade.points)
    if grade.passed:
        return Transition(_locked(checked, LockReason.COMPLETE), _ON_CHANGE)
    if checked.attempts_exhausted:
        return Transition(_locked(checked, LockReason.ATTEMPTS_EXHAUSTED), _ON_CHANGE)
    return Transition(checked, _ON_CHANGE)


def apply_timeout(state: AttemptState, grade: Grade) -> Transition:
    """Grade the input as it stands and lock with ``TIMEOUT``.

    The timeout does not consume an attempt and reports ``TIMEOUT`` even when
    the final grade passed.
    """
    if state.locked:
        return Transition(state)
    graded = replace(state, awarded_points=grade.points)
    return Transition(_locked(graded, LockReason.TIMEOUT), _ON_CHANGE)


def apply_lock(state: AttemptState, reason: LockReason = LockReason.NONE) -> Transition:
    if state.locked:
        return Transition(state)
    return Transition(_locked(state, reason), _ON_CHANGE)


def _locked(state: AttemptState, reason: LockReason) -> AttemptState:
    return replace(state, locked=True, lock_reason=reason)
