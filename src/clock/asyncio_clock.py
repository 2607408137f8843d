"""Clock backed by a running asyncio event loop."""

from __future__ import annotations

import asyncio
from typing import Callable


class AsyncioClock:
    """Schedules callbacks on one asyncio loop using its monotonic time."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def now_millis(self) -> int:
        return int(self._loop.time() * 1000)

    def call_later(
        self,
        delay_millis: int,
        callback: Callable[[], None],
    ) -> asyncio.TimerHandle:
        delay_seconds = max(0, int(delay_millis)) / 1000.0
        return self._loop.call_later(delay_seconds, callback)
