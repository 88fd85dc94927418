"""
Timing utilities - debounce and throttle.

Generic rate limiters used by interactive surfaces to decide how often to
re-run style resolution in response to rapid input.

Key behaviors:
- each returned callable owns its timer state; nothing is shared between
  instances, so every call site needs its own
- debounce delivers only the most recent call, delay_ms after the last one
- throttle fires the first call of a window at once and the latest call
  received inside the window exactly once, when the window closes
- cancellation is implicit: a superseded pending call never runs
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import Any

from .ports import SchedulerPort, TimerHandle

_default_scheduler: SchedulerPort | None = None
_default_lock = threading.Lock()


def get_default_scheduler() -> SchedulerPort:
    """Process-wide threading scheduler, created on first use."""
    global _default_scheduler
    with _default_lock:
        if _default_scheduler is None:
            from kayui.adapters.scheduler import ThreadingScheduler

            _default_scheduler = ThreadingScheduler()
        return _default_scheduler


def debounce(
    action: Callable[..., Any],
    delay_ms: float,
    *,
    scheduler: SchedulerPort | None = None,
) -> Callable[..., None]:
    """
    Delay action until delay_ms have passed without another call.

    Args:
        action: Callable to rate-limit
        delay_ms: Quiet period in milliseconds
        scheduler: Clock/timer source (defaults to a threading scheduler)

    Returns:
        A callable taking the same arguments as action. Only the arguments
        of the last call before a quiet period are delivered.
    """
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
    sched = scheduler or get_default_scheduler()
    lock = threading.RLock()
    pending: TimerHandle | None = None
    generation = 0

    def fire(call_generation: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        nonlocal pending
        with lock:
            if call_generation != generation:
                return
            pending = None
        action(*args, **kwargs)

    @functools.wraps(action)
    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal pending, generation
        with lock:
            if pending is not None:
                pending.cancel()
            generation += 1
            pending = sched.call_later(delay_ms, functools.partial(fire, generation, args, kwargs))

    return debounced


def throttle(
    action: Callable[..., Any],
    interval_ms: float,
    *,
    scheduler: SchedulerPort | None = None,
) -> Callable[..., None]:
    """
    Limit action to one leading and one trailing call per interval.

    A call outside any open window fires immediately and opens a window of
    interval_ms. Calls inside the window are coalesced: the last one fires
    when the window closes. The trailing firing does not open a new window.

    Args:
        action: Callable to rate-limit
        interval_ms: Window length in milliseconds
        scheduler: Clock/timer source (defaults to a threading scheduler)

    Returns:
        A callable taking the same arguments as action.
    """
    if interval_ms < 0:
        raise ValueError(f"interval_ms must be non-negative, got {interval_ms}")
    sched = scheduler or get_default_scheduler()
    lock = threading.RLock()
    window_start: float | None = None
    window_id = 0
    trailing: tuple[tuple[Any, ...], dict[str, Any]] | None = None
    timer: TimerHandle | None = None

    def close_window(closing_id: int) -> None:
        nonlocal trailing, timer
        with lock:
            if closing_id != window_id:
                return
            call = trailing
            trailing = None
            timer = None
        if call is not None:
            action(*call[0], **call[1])

    @functools.wraps(action)
    def throttled(*args: Any, **kwargs: Any) -> None:
        nonlocal window_start, window_id, trailing, timer
        with lock:
            now = sched.now()
            if window_start is not None and now - window_start < interval_ms:
                trailing = (args, kwargs)
                if timer is None:
                    remaining = window_start + interval_ms - now
                    timer = sched.call_later(remaining, functools.partial(close_window, window_id))
                return

            # The previous window is over. A trailing call whose timer has
            # not run yet is delivered before the new leading call.
            overdue = trailing
            trailing = None
            if timer is not None:
                timer.cancel()
                timer = None
            window_id += 1
            window_start = now

        if overdue is not None:
            action(*overdue[0], **overdue[1])
        action(*args, **kwargs)

    return throttled
