"""Time sources and delayed-callback scheduling."""

from .asyncio_clock import AsyncioClock
from .contracts import Clock, TimerHandle
from .manual import ManualClock

__all__ = [
    "AsyncioClock",
    "Clock",
    "ManualClock",
    "TimerHandle",
]
