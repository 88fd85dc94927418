"""
Timing component - debounce and throttle rate limiters.
"""

from .component import debounce, get_default_scheduler, throttle
from .ports import SchedulerPort, TimerHandle

__all__ = [
    # Entry points
    "debounce",
    "throttle",
    "get_default_scheduler",
    # Ports
    "SchedulerPort",
    "TimerHandle",
]
