"""Per-concern bookkeeping of pending delayed callbacks."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from clock import Clock, TimerHandle

from .constants import ALL_CONCERNS


class _Entry:
    __slots__ = ("callback", "handle")

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.handle: Optional[TimerHandle] = None


class ReminderSchedule:
    """Holds at most one pending callback per concern.

    Scheduling a concern cancels its previous callback first. A callback
    that was superseded or cancelled never runs, even if the clock already
    dispatched it.
    """

    def __init__(self, clock: Clock, logger: Optional[logging.Logger] = None):
        self._clock = clock
        self._logger = logger or logging.getLogger("tasktimer.schedule")
        self._entries: dict[str, _Entry] = {}

    def schedule(
        self,
        concern: str,
        delay_millis: int,
        callback: Callable[[], None],
    ) -> None:
        self.cancel(concern)
        entry = _Entry(callback)
        self._entries[concern] = entry
        entry.handle = self._clock.call_later(
            delay_millis,
            lambda: self._fire(concern, entry),
        )
        self._logger.debug("Scheduled %s in %dms", concern, delay_millis)

    def cancel(self, concern: str) -> None:
        entry = self._entries.pop(concern, None)
        if entry is None:
            return
        if entry.handle is not None:
            entry.handle.cancel()
        self._logger.debug("Cancelled %s", concern)

    def cancel_all(self, concerns: Iterable[str] = ALL_CONCERNS) -> None:
        for concern in tuple(concerns):
            self.cancel(concern)

    def is_active(self, concern: str) -> bool:
        return concern in self._entries

    def active_concerns(self) -> frozenset[str]:
        return frozenset(self._entries)

    def _fire(self, concern: str, entry: _Entry) -> None:
        if self._entries.get(concern) is not entry:
            return
        del self._entries[concern]
        entry.callback()
