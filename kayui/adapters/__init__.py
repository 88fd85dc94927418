"""
Adapters: concrete implementations of component ports.
"""

from kayui.adapters.scheduler import AsyncioScheduler, ThreadingScheduler

__all__ = ["AsyncioScheduler", "ThreadingScheduler"]
