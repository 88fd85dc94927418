"""
Tests for the threading and asyncio scheduler adapters.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time

import pytest

from kayui.adapters.scheduler import AsyncioScheduler, ThreadingScheduler
from kayui.components.timing import debounce, throttle


class TestThreadingScheduler:
    """ThreadingScheduler runs callbacks on timer threads."""

    def test_now_is_monotonic_ms(self) -> None:
        scheduler = ThreadingScheduler()
        first = scheduler.now()
        time.sleep(0.01)
        assert scheduler.now() - first >= 5

    def test_call_later_runs(self) -> None:
        scheduler = ThreadingScheduler()
        fired = threading.Event()

        scheduler.call_later(10, fired.set)

        assert fired.wait(timeout=2.0)

    def test_cancel(self) -> None:
        scheduler = ThreadingScheduler()
        fired = threading.Event()

        handle = scheduler.call_later(200, fired.set)
        handle.cancel()

        assert not fired.wait(timeout=0.4)

    def test_callback_errors_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing callback is logged, not propagated."""
        scheduler = ThreadingScheduler()

        def explode() -> None:
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR):
            timer = scheduler.call_later(0, explode)
            timer.join(timeout=2.0)

        assert "Error in scheduled callback" in caplog.text

    def test_debounce_with_real_timers(self) -> None:
        """A tight burst through real timers still delivers once."""
        calls: list[int] = []
        done = threading.Event()

        def record(value: int) -> None:
            calls.append(value)
            done.set()

        debounced = debounce(record, 30, scheduler=ThreadingScheduler())
        for i in range(5):
            debounced(i)

        assert done.wait(timeout=2.0)
        time.sleep(0.1)
        assert calls == [4]


class TestAsyncioScheduler:
    """AsyncioScheduler runs callbacks on the event loop."""

    def test_debounce_on_loop(self) -> None:
        calls: list[str] = []

        async def scenario() -> None:
            debounced = debounce(calls.append, 20, scheduler=AsyncioScheduler())
            debounced("a")
            debounced("b")
            await asyncio.sleep(0.1)

        asyncio.run(scenario())
        assert calls == ["b"]

    def test_throttle_on_loop(self) -> None:
        calls: list[int] = []

        async def scenario() -> None:
            throttled = throttle(calls.append, 50, scheduler=AsyncioScheduler())
            throttled(1)
            throttled(2)
            throttled(3)
            await asyncio.sleep(0.15)

        asyncio.run(scenario())
        assert calls == [1, 3]

    def test_explicit_loop(self) -> None:
        loop = asyncio.new_event_loop()
        try:
            scheduler = AsyncioScheduler(loop)
            assert scheduler.loop is loop
            assert scheduler.now() == pytest.approx(loop.time() * 1000.0, abs=50)
        finally:
            loop.close()
