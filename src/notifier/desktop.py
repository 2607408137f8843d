"""Desktop toast notifications via plyer."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .contracts import Notification
from .errors import NotifierDependencyError


class DesktopNotifier:
    """Shows push notifications as OS toasts.

    Toasts cannot be updated in place, so ongoing updates are only tracked
    and left to the in-app and websocket views.
    """

    def __init__(
        self,
        *,
        app_name: str,
        timeout_seconds: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        self._app_name = app_name
        self._timeout_seconds = int(timeout_seconds)
        self._logger = logger or logging.getLogger("notifier.desktop")
        self._backend = self._create_backend()

    def _create_backend(self) -> Any:
        try:
            from plyer import notification
        except ImportError as error:  # pragma: no cover - depends on install extras
            raise NotifierDependencyError(
                "Desktop notifications need plyer. Install plyer."
            ) from error
        return notification

    def show_ongoing(self, notification: Notification) -> None:
        self._logger.debug("Ongoing update not shown as toast: %s", notification.title)

    def push(self, notification: Notification) -> None:
        self._backend.notify(
            title=notification.title,
            message=notification.body,
            app_name=self._app_name,
            timeout=self._timeout_seconds,
        )

    def clear(self) -> None:
        # Toasts dismiss themselves.
        return None
