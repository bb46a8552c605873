"""Display strings derived from quiz and question state.

Renderers call these pure helpers instead of deciding visibility or wording
themselves.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math

from quiz_engine.core.localization import find_language_entry
from quiz_engine.core.models import LockReason, QuizResults


@dataclass(frozen=True, slots=True)
class LockBadge:
    """What a renderer shows in place of the check button once locked."""

    reason: LockReason
    symbol: str
    text: str


_LOCK_BADGES: dict[LockReason, tuple[str, dict[str, str]]] = {
    LockReason.NONE: ("\N{LOCK}", {"default": "en", "en": "Locked", "de": "Gesperrt"}),
    LockReason.COMPLETE: ("\N{WHITE HEAVY CHECK MARK}", {"default": "en", "en": "Completed", "de": "Abgeschlossen"}),
    LockReason.TIMEOUT: ("\N{ALARM CLOCK}", {"default": "en", "en": "Time is up", "de": "Zeit abgelaufen"}),
    LockReason.ATTEMPTS_EXHAUSTED: (
        "\N{LOCK}",
        {"default": "en", "en": "No attempts left", "de": "Keine Versuche mehr"},
    ),
}


def lock_badge(reason: LockReason, languages: Sequence[str] | str = ("en",)) -> LockBadge:
    symbol, entries = _LOCK_BADGES[reason]
    return LockBadge(reason=reason, symbol=symbol, text=find_language_entry(languages, entries))


def check_label(languages: Sequence[str] | str = ("en",)) -> str:
    return find_language_entry(languages, {"default": "en", "en": "Check", "de": "Überprüfen"})


def points_label(points: int, languages: Sequence[str] | str = ("en",)) -> str:
    return find_language_entry(
        languages,
        {"default": "en", "en": f"({points} points)", "de": f"({points} Punkte)"},
    )


def attempts_label(max_attempts: int, languages: Sequence[str] | str = ("en",)) -> str:
    plural = max_attempts > 1
    return find_language_entry(
        languages,
        {
            "default": "en",
            "en": f"You only have {max_attempts} attempt{'s' if plural else ''} for this question!",
            "de": f"Du hast nur {max_attempts} Versuch{'e' if plural else ''} für diese Frage!",
        },
    )


def attempt_counter(attempts_used: int, max_attempts: int) -> str | None:
    """``"[used / max]"``, or None when attempts are unlimited."""
    if max_attempts <= 0:
        return None
    return f"[{attempts_used} / {max_attempts}]"


def index_label(index: int | None) -> str:
    return f"#{index}" if index else ""


def format_timer(elapsed: float, remaining: float | None = None) -> str:
    """Format seconds as ``MM:SS`` (``HH:MM:SS`` past an hour), preferring the remaining time."""
    seconds_total = remaining if remaining is not None else elapsed
    seconds_total = max(0, math.floor(seconds_total))
    hours = seconds_total // 3600
    minutes = (seconds_total // 60) % 60
    seconds = seconds_total % 60
    prefix = f"{hours:02d}:" if hours > 0 else ""
    return f"{prefix}{minutes:02d}:{seconds:02d}"


def format_score(results: QuizResults) -> str:
    return f"{results.points} / {results.max_points} ({results.correct_percentage * 100:.2f}%)"
