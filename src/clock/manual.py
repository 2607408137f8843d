"""Virtual clock that only moves when told to."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Optional


class _ManualHandle:
    def __init__(
        self,
        due_millis: int,
        callback: Callable[[], None],
        on_cancel: Optional[Callable[[], None]] = None,
    ):
        self.due_millis = due_millis
        self.callback = callback
        self.cancelled = False
        self._on_cancel = on_cancel

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()


class ManualClock:
    """Deterministic clock for simulations and tests.

    Callbacks run in due-time order; callbacks sharing a due time run in the
    order they were registered. Callbacks registered while advancing run in
    the same advance when they fall due inside it. Cancelled callbacks are
    pruned once they make up more than half of the queue.
    """

    def __init__(self, start_millis: int = 0):
        self._now = int(start_millis)
        self._queue: list[tuple[int, int, _ManualHandle]] = []
        self._sequence = itertools.count()
        self._cancelled = 0

    def now_millis(self) -> int:
        return self._now

    def call_later(
        self,
        delay_millis: int,
        callback: Callable[[], None],
    ) -> _ManualHandle:
        handle = _ManualHandle(
            self._now + max(0, int(delay_millis)),
            callback,
            on_cancel=self._handle_cancelled,
        )
        heapq.heappush(self._queue, (handle.due_millis, next(self._sequence), handle))
        return handle

    def advance(self, millis: int) -> None:
        if millis < 0:
            raise ValueError("cannot move a clock backwards")
        self._run_until(self._now + int(millis))

    def advance_to(self, target_millis: int) -> None:
        self.advance(int(target_millis) - self._now)

    def run_pending(self) -> None:
        """Run callbacks that are already due without moving time."""
        self._run_until(self._now)

    def pending_count(self) -> int:
        return len(self._queue) - self._cancelled

    def _handle_cancelled(self) -> None:
        self._cancelled += 1
        if self._cancelled * 2 > len(self._queue):
            self._queue = [entry for entry in self._queue if not entry[2].cancelled]
            heapq.heapify(self._queue)
            self._cancelled = 0

    def _run_until(self, target: int) -> None:
        while self._queue and self._queue[0][0] <= target:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                self._cancelled -= 1
                continue
            self._now = handle.due_millis
            # Fired handles leave the queue; a late cancel() must not count.
            handle._on_cancel = None
            handle.callback()
        self._now = target
