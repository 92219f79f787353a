"""
Deferred callbacks and trailing-edge debounce.

The chart never blocks. Its only deferred work is the auto-fit resize, which
is handed to a Scheduler and runs later on the thread that drives the
scheduler. An asyncio loop already has the call_later() shape, so a chart
created inside a running loop uses that loop. Elsewhere the host passes a
scheduler explicitly.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
from collections.abc import Callable
from typing import Any, Protocol


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], Any]) -> Handle: ...


def running_loop_scheduler() -> Scheduler | None:
    """The running asyncio loop of the calling thread, if there is one."""
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class TimerScheduler:
    """
    Runs callbacks on threading.Timer threads.

    Opt-in only. The callback runs off the caller's thread while the caller
    may still be using the chart, and charts do no locking of their own: the
    host must serialize every call on the chart (including destroy()) with
    the callbacks it schedules here.
    """

    def call_later(self, delay: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class _ManualHandle:
    def __init__(self, when: float, callback: Callable[[], Any]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Scheduler driven by explicit advance() calls.

    Callbacks run on the thread calling advance(), in due-time order.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualHandle]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> _ManualHandle:
        handle = _ManualHandle(self.now + delay, callback)
        heapq.heappush(self._queue, (handle.when, next(self._counter), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run everything now due. Returns how many ran."""
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            self.now = when
            if handle.cancelled:
                continue
            handle.callback()
            ran += 1
        self.now = target
        return ran


class Debouncer:
    """
    Coalesce bursts of calls into one trailing call.

    Each trigger() resets the delay; the callback runs once, delay seconds
    after the last trigger. cancel() drops anything pending.
    """

    def __init__(self, callback: Callable[[], Any], delay: float, scheduler: Scheduler):
        self._callback = callback
        self._delay = delay
        self._scheduler = scheduler
        self._handle: Handle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, *_: Any) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = self._scheduler.call_later(self._delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._callback()
