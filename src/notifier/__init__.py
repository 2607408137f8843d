"""Notification model and presentation backends."""

from .constants import (
    KIND_ONGOING,
    KIND_PUSH,
    NOTIFICATION_ACTION_COMPLETE,
    NOTIFICATION_ACTION_OPEN_APP,
    NOTIFICATION_ACTION_SHOW_TIMER,
    PRIORITY_HIGH,
    PRIORITY_LOW,
)
from .contracts import Notification, NotificationAction, Notifier
from .desktop import DesktopNotifier
from .errors import NotifierDependencyError, NotifierError
from .log_notifier import LoggingNotifier
from .service import FanoutNotifier

__all__ = [
    "DesktopNotifier",
    "FanoutNotifier",
    "KIND_ONGOING",
    "KIND_PUSH",
    "LoggingNotifier",
    "NOTIFICATION_ACTION_COMPLETE",
    "NOTIFICATION_ACTION_OPEN_APP",
    "NOTIFICATION_ACTION_SHOW_TIMER",
    "Notification",
    "NotificationAction",
    "Notifier",
    "NotifierDependencyError",
    "NotifierError",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
]
