"""Notifier that writes notifications to the application log."""

from __future__ import annotations

import logging
from typing import Optional

from .contracts import Notification


class LoggingNotifier:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("notifier")
        self._last_ongoing: Optional[Notification] = None

    @property
    def last_ongoing(self) -> Optional[Notification]:
        return self._last_ongoing

    def show_ongoing(self, notification: Notification) -> None:
        if self._last_ongoing is None or self._last_ongoing.title != notification.title:
            self._logger.info("Ongoing: %s | %s", notification.title, notification.body)
        else:
            self._logger.debug("Ongoing: %s | %s", notification.title, notification.body)
        self._last_ongoing = notification

    def push(self, notification: Notification) -> None:
        self._logger.info(
            "Push (%s): %s | %s",
            notification.priority,
            notification.title,
            notification.body,
        )

    def clear(self) -> None:
        if self._last_ongoing is not None:
            self._logger.debug("Ongoing notification cleared")
        self._last_ongoing = None
