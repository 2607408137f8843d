"""Fan-out notifier that isolates failures of individual backends."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from .contracts import Notification, Notifier


class FanoutNotifier:
    def __init__(
        self,
        notifiers: Iterable[Notifier],
        logger: Optional[logging.Logger] = None,
    ):
        self._notifiers = list(notifiers)
        self._logger = logger or logging.getLogger("notifier")

    def show_ongoing(self, notification: Notification) -> None:
        self._each("show_ongoing", lambda target: target.show_ongoing(notification))

    def push(self, notification: Notification) -> None:
        self._each("push", lambda target: target.push(notification))

    def clear(self) -> None:
        self._each("clear", lambda target: target.clear())

    def _each(self, operation: str, call: Callable[[Notifier], None]) -> None:
        for target in tuple(self._notifiers):
            try:
                call(target)
            except Exception as error:
                self._logger.warning(
                    "%s.%s failed: %s",
                    type(target).__name__,
                    operation,
                    error,
                )
