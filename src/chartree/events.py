"""
Chart lifecycle events.

Every lifecycle step is announced as a before/after pair. Listeners are
called synchronously, in registration order, on the caller's thread.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any


class ChartEvent(str, Enum):
    BEFORE_RENDER = "beforerender"
    AFTER_RENDER = "afterrender"

    BEFORE_PAINT = "beforepaint"
    AFTER_PAINT = "afterpaint"

    BEFORE_CHANGE_DATA = "beforechangedata"
    AFTER_CHANGE_DATA = "afterchangedata"

    BEFORE_CLEAR = "beforeclear"
    AFTER_CLEAR = "afterclear"

    BEFORE_DESTROY = "beforedestroy"
    AFTER_DESTROY = "afterdestroy"

    BEFORE_CHANGE_SIZE = "beforechangesize"
    AFTER_CHANGE_SIZE = "afterchangesize"


Listener = Callable[..., Any]


class Emitter:
    """Minimal listener registry mixed into the chart."""

    def __init__(self):
        self._listeners: dict[str, list[tuple[Listener, bool]]] = {}

    def on(self, event: str, listener: Listener, once: bool = False):
        self._listeners.setdefault(_event_key(event), []).append((listener, once))
        return self

    def once(self, event: str, listener: Listener):
        return self.on(event, listener, once=True)

    def off(self, event: str | None = None, listener: Listener | None = None):
        """Remove one listener, all listeners of an event, or everything."""
        if event is None:
            self._listeners.clear()
            return self
        key = _event_key(event)
        if listener is None:
            self._listeners.pop(key, None)
            return self
        remaining = [entry for entry in self._listeners.get(key, []) if entry[0] is not listener]
        if remaining:
            self._listeners[key] = remaining
        else:
            self._listeners.pop(key, None)
        return self

    def emit(self, event: str, *args: Any) -> None:
        key = _event_key(event)
        entries = self._listeners.get(key)
        if not entries:
            return
        # Drop one-shot listeners before calling so re-entrant emits skip them
        self._listeners[key] = [entry for entry in entries if not entry[1]]
        for listener, _ in entries:
            listener(*args)


def _event_key(event: str) -> str:
    if isinstance(event, ChartEvent):
        return event.value
    return event
