"""Ordered in-process fan-out used by the engine and the event bus."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class Channel(Generic[T]):
    """Delivers messages to listeners in publish order.

    A message published from inside a listener is queued and delivered once
    the current message has reached every listener, so all listeners observe
    the same order. Listener failures are logged and never reach the sender.
    """

    def __init__(self, name: str, logger: Optional[logging.Logger] = None):
        self._name = name
        self._logger = logger or logging.getLogger("bus")
        self._listeners: list[Listener[T]] = []
        self._pending: deque[T] = deque()
        self._dispatching = False

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, message: T) -> None:
        self._pending.append(message)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                current = self._pending.popleft()
                for listener in tuple(self._listeners):
                    self._deliver(listener, current)
        finally:
            self._dispatching = False

    def _deliver(self, listener: Listener[T], message: T) -> None:
        try:
            listener(message)
        except Exception as error:
            self._logger.error(
                "Listener on %s channel failed for %s: %s",
                self._name,
                type(message).__name__,
                error,
                exc_info=True,
            )
