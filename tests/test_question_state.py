"""Tests for the pure attempt-lifecycle transitions."""

from __future__ import annotations

from dataclasses import replace

from quiz_engine.core.models import AttemptState, Grade, LockReason
from quiz_engine.core.question_state import (
    SideEffect,
    apply_check,
    apply_lock,
    apply_timeout,
    can_check,
)

PASS = Grade(passed=True, points=2)
FAIL = Grade(passed=False, points=1)


def test_passing_check_locks_complete() -> None:
    transition = apply_check(AttemptState(), PASS)

    assert transition.state.locked
    assert transition.state.lock_reason is LockReason.COMPLETE
    assert transition.state.attempts_used == 1
    assert transition.state.awarded_points == 2
    assert transition.effects == (SideEffect.RENDER, SideEffect.NOTIFY_QUIZ)


def test_failing_check_with_unlimited_attempts_stays_editable() -> None:
    state = AttemptState()
    for _ in range(5):
        state = apply_check(state, FAIL).state

    assert not state.locked
    assert state.attempts_used == 5
    assert state.awarded_points == 1
    assert can_check(state)


def test_exhausting_attempts_locks_with_explicit_reason() -> None:
    state = AttemptState(max_attempts=2)
    state = apply_check(state, FAIL).state
    assert not state.locked

    state = apply_check(state, FAIL).state

    assert state.locked
    assert state.lock_reason is LockReason.ATTEMPTS_EXHAUSTED
    assert not can_check(state)


def test_passing_on_last_attempt_is_complete() -> None:
    state = apply_check(AttemptState(max_attempts=1), PASS).state

    assert state.lock_reason is LockReason.COMPLETE


def test_check_on_locked_state_is_noop() -> None:
    locked = AttemptState(attempts_used=1, locked=True, lock_reason=LockReason.COMPLETE, awarded_points=2)

    transition = apply_check(locked, Grade(passed=False, points=0))

    assert transition.state == locked
    assert not transition.changed


def test_transitions_do_not_mutate_input() -> None:
    state = AttemptState(max_attempts=3)
    snapshot = replace(state)

    apply_check(state, PASS)
    apply_timeout(state, FAIL)
    apply_lock(state, LockReason.NONE)

    assert state == snapshot


def test_timeout_locks_even_when_grade_passes() -> None:
    state = AttemptState(attempts_used=1, max_attempts=3)

    transition = apply_timeout(state, PASS)

    assert transition.state.lock_reason is LockReason.TIMEOUT
    assert transition.state.awarded_points == 2
    assert transition.state.attempts_used == 1
    assert transition.changed


def test_timeout_after_lock_is_noop() -> None:
    locked = apply_check(AttemptState(), PASS).state

    transition = apply_timeout(locked, FAIL)

    assert transition.state == locked
    assert transition.effects == ()


def test_lock_is_idempotent() -> None:
    first = apply_lock(AttemptState(), LockReason.NONE)
    second = apply_lock(first.state, LockReason.TIMEOUT)

    assert first.changed
    assert first.state.lock_reason is LockReason.NONE
    assert not second.changed
    assert second.state == first.state
