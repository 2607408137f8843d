"""Notification kind, priority, and action identifiers."""

from __future__ import annotations

KIND_ONGOING = "ongoing"
KIND_PUSH = "push"

PRIORITY_LOW = "low"
PRIORITY_HIGH = "high"

NOTIFICATION_ACTION_SHOW_TIMER = "show_timer"
NOTIFICATION_ACTION_COMPLETE = "complete"
NOTIFICATION_ACTION_OPEN_APP = "open_app"
