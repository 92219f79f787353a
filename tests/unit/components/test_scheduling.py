"""
Unit tests for schedulers and the trailing-edge debouncer.
"""

import asyncio
import threading

from chartree.scheduling import Debouncer, ManualScheduler, TimerScheduler, running_loop_scheduler


class TestManualScheduler:
    def test_runs_when_due(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(1.0, lambda: calls.append("a"))

        assert scheduler.advance(0.5) == 0
        assert calls == []
        assert scheduler.advance(0.5) == 1
        assert calls == ["a"]

    def test_runs_in_due_order(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(2.0, lambda: calls.append("late"))
        scheduler.call_later(1.0, lambda: calls.append("early"))
        scheduler.advance(5.0)
        assert calls == ["early", "late"]

    def test_cancelled_handle_skipped(self):
        scheduler = ManualScheduler()
        calls = []
        handle = scheduler.call_later(1.0, lambda: calls.append("a"))
        handle.cancel()
        assert scheduler.pending == 0
        assert scheduler.advance(2.0) == 0
        assert calls == []


class TestRunningLoopScheduler:
    def test_none_outside_a_loop(self):
        assert running_loop_scheduler() is None

    def test_loop_runs_debounced_call_on_its_thread(self):
        threads = []

        async def debounce_twice():
            scheduler = running_loop_scheduler()
            assert scheduler is asyncio.get_running_loop()
            debouncer = Debouncer(lambda: threads.append(threading.current_thread()), 0.01, scheduler)
            debouncer.trigger()
            debouncer.trigger()
            await asyncio.sleep(0.2)

        asyncio.run(debounce_twice())

        assert threads == [threading.current_thread()]


class TestTimerScheduler:
    def test_runs_callback(self):
        done = threading.Event()
        timer = TimerScheduler().call_later(0.0, done.set)
        timer.join(timeout=5)
        assert done.is_set()

    def test_cancel(self):
        done = threading.Event()
        timer = TimerScheduler().call_later(60.0, done.set)
        timer.cancel()
        timer.join(timeout=5)
        assert not done.is_set()


class TestDebouncer:
    def test_burst_coalesces_into_one_call(self):
        scheduler = ManualScheduler()
        calls = []
        debouncer = Debouncer(lambda: calls.append(scheduler.now), 0.3, scheduler)

        debouncer.trigger()
        scheduler.advance(0.2)
        debouncer.trigger()
        scheduler.advance(0.2)
        debouncer.trigger()
        scheduler.advance(0.2)
        assert calls == []

        scheduler.advance(0.2)
        assert len(calls) == 1
        assert not debouncer.pending

    def test_separate_bursts_fire_separately(self):
        scheduler = ManualScheduler()
        calls = []
        debouncer = Debouncer(lambda: calls.append(1), 0.3, scheduler)

        debouncer.trigger()
        scheduler.advance(1.0)
        debouncer.trigger()
        scheduler.advance(1.0)
        assert calls == [1, 1]

    def test_cancel_drops_pending(self):
        scheduler = ManualScheduler()
        calls = []
        debouncer = Debouncer(lambda: calls.append(1), 0.3, scheduler)

        debouncer.trigger()
        assert debouncer.pending
        debouncer.cancel()
        scheduler.advance(1.0)

        assert calls == []
        assert not debouncer.pending

    def test_trigger_ignores_arguments(self):
        scheduler = ManualScheduler()
        calls = []
        debouncer = Debouncer(lambda: calls.append(1), 0.3, scheduler)
        debouncer.trigger("resize", {"width": 10})
        scheduler.advance(1.0)
        assert calls == [1]
