"""Synchronous publish/subscribe with one channel per event type."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EventBus:
    """Dispatches events to the listeners registered for their class.

    Listeners of a channel form an insertion-ordered set, so registering the
    same listener twice has no effect. By default a failing listener is logged
    and the remaining listeners still run; pass ``isolate_errors=False`` to let
    the exception reach the emitter instead.
    """

    def __init__(self, isolate_errors: bool = True) -> None:
        self._isolate_errors = isolate_errors
        self._listeners: dict[type, dict[Callable[[Any], None], None]] = {}

    def on(self, channel: type[E], listener: Callable[[E], None]) -> None:
        self._listeners.setdefault(channel, {})[listener] = None

    def off(self, channel: type[E], listener: Callable[[E], None]) -> None:
        listeners = self._listeners.get(channel)
        if listeners is None:
            return
        listeners.pop(listener, None)

    def emit(self, event: object) -> None:
        listeners = self._listeners.get(type(event))
        if not listeners:
            return
        # Snapshot so listeners may subscribe or unsubscribe while dispatching.
        for listener in list(listeners):
            if not self._isolate_errors:
                listener(event)
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed while handling %s", listener, type(event).__name__)

    def listener_count(self, channel: type) -> int:
        return len(self._listeners.get(channel, ()))

    def clear(self) -> None:
        self._listeners.clear()
