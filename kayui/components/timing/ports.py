"""
Timing component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback if it has not run yet."""
        ...


class SchedulerPort(Protocol):
    """Monotonic clock plus delayed-callback primitive."""

    def now(self) -> float:
        """Current monotonic time in milliseconds."""
        ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after delay_ms milliseconds."""
        ...
