"""Protocols for the time source used by the timer engine."""

from __future__ import annotations

from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Cancelable handle returned for every scheduled callback."""
    def cancel(self) -> None:
        ...


class Clock(Protocol):
    """Millisecond time source plus non-blocking delayed callbacks."""
    def now_millis(self) -> int:
        ...

    def call_later(
        self,
        delay_millis: int,
        callback: Callable[[], None],
    ) -> TimerHandle:
        ...
