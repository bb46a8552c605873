"""Elapsed/remaining time bookkeeping for a quiz."""

from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float:
        """Return monotonic seconds."""
        ...


class MonotonicClock:
    """Adapter clock (real monotonic time)."""

    def now(self) -> float:
        return time.monotonic()


class FakeClock:
    """Deterministic clock for tests and scripted hosts."""

    def __init__(self, *, start: float = 0.0) -> None:
        self._t = float(start)

    def now(self) -> float:
        return self._t

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        self._t += float(seconds)


@dataclass(slots=True)
class TimerState:
    start_time: float
    time_limit: float | None = None  # seconds; None = unlimited
    timed_out: bool = False

    @property
    def has_limit(self) -> bool:
        return self.time_limit is not None and self.time_limit > 0


class QuizTimer:
    """Tracks the quiz start time and whether the time limit has passed."""

    def __init__(self, time_limit: float | None = None, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else MonotonicClock()
        self._state = TimerState(start_time=self._clock.now(), time_limit=time_limit)

    @property
    def time_limit(self) -> float | None:
        return self._state.time_limit if self._state.has_limit else None

    @property
    def timed_out(self) -> bool:
        return self._state.timed_out

    def elapsed(self) -> float:
        return max(0.0, self._clock.now() - self._state.start_time)

    def remaining(self) -> float | None:
        if not self._state.has_limit:
            return None
        return max(0.0, self._state.time_limit - self.elapsed())

    def expire_if_due(self) -> bool:
        """Mark the timer as timed out the first time the limit is reached.

        Returns True only on that first call.
        """
        if self._state.timed_out or not self._state.has_limit:
            return False
        remaining = self.remaining()
        if remaining is None or remaining > 0:
            return False
        self._state.timed_out = True
        return True
