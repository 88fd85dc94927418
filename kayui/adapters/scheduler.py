"""
Scheduler adapters (SchedulerPort implementations).

- ThreadingScheduler: threading.Timer per callback, time.monotonic clock.
  Callbacks run on timer threads.
- AsyncioScheduler: loop.call_later on an event loop, loop.time clock.
  Callbacks run on the loop thread; call only from that thread.

Both log and contain exceptions raised by a callback, since there is no
caller left to propagate them to.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


def _run_callback(callback: Callable[[], None]) -> None:
    try:
        callback()
    except Exception:
        logger.exception("Error in scheduled callback")


class ThreadingScheduler:
    """Scheduler backed by daemon threading.Timer instances."""

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(max(delay_ms, 0.0) / 1000.0, _run_callback, args=(callback,))
        timer.daemon = True
        timer.start()
        return timer


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    With no loop given, the running loop at call time is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(delay_ms, 0.0) / 1000.0, _run_callback, callback)
