"""Tests for translated lookups and display helpers."""

from __future__ import annotations

import pytest

from quiz_engine.core.labels import (
    attempt_counter,
    attempts_label,
    check_label,
    format_score,
    format_timer,
    index_label,
    lock_badge,
    points_label,
)
from quiz_engine.core.localization import find_language_entry
from quiz_engine.core.models import LockReason, QuizResults

ENTRIES = {"default": "en", "en": "Hello", "de": "Hallo"}


@pytest.mark.parametrize(
    ("languages", "expected"),
    [
        (["de-AT", "en"], "Hallo"),
        (["fr", "en-GB"], "Hello"),
        ("de", "Hallo"),
        (["fr"], "Hello"),
        ([], "Hello"),
    ],
)
def test_find_language_entry(languages, expected) -> None:
    assert find_language_entry(languages, ENTRIES) == expected


def test_default_may_be_literal_text() -> None:
    assert find_language_entry(["fr"], {"default": "MISSING"}) == "MISSING"


def test_table_without_entries_is_empty() -> None:
    assert find_language_entry(["en"], {}) == ""


def test_lock_badges_follow_reason() -> None:
    assert lock_badge(LockReason.COMPLETE).text == "Completed"
    assert lock_badge(LockReason.TIMEOUT, ["de"]).text == "Zeit abgelaufen"
    assert lock_badge(LockReason.ATTEMPTS_EXHAUSTED).reason is LockReason.ATTEMPTS_EXHAUSTED
    assert lock_badge(LockReason.NONE).text == "Locked"


def test_question_chrome_labels() -> None:
    assert check_label(["de"]) == "Überprüfen"
    assert points_label(3) == "(3 points)"
    assert attempts_label(1) == "You only have 1 attempt for this question!"
    assert attempts_label(2, ["de"]) == "Du hast nur 2 Versuche für diese Frage!"


def test_attempt_counter_hidden_when_unlimited() -> None:
    assert attempt_counter(0, 0) is None
    assert attempt_counter(1, 3) == "[1 / 3]"


def test_index_label() -> None:
    assert index_label(4) == "#4"
    assert index_label(None) == ""


@pytest.mark.parametrize(
    ("elapsed", "remaining", "expected"),
    [
        (0, None, "00:00"),
        (75.9, None, "01:15"),
        (3725, None, "01:02:05"),
        (10, 290.4, "04:50"),
        (10, -1, "00:00"),
    ],
)
def test_format_timer(elapsed, remaining, expected) -> None:
    assert format_timer(elapsed, remaining) == expected


def test_format_score() -> None:
    results = QuizResults(points=1, max_points=2, correct_percentage=0.5)
    assert format_score(results) == "1 / 2 (50.00%)"
