"""Notification payloads and the presenter protocol consumed by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Protocol

NotificationKind = Literal["ongoing", "push"]
NotificationPriority = Literal["low", "high"]


@dataclass(frozen=True)
class NotificationAction:
    """Button attached to a notification."""
    label: str
    action: str


@dataclass(frozen=True)
class Notification:
    """Presentation-agnostic notification content."""
    kind: NotificationKind
    title: str
    body: str
    priority: NotificationPriority
    tap_action: Optional[str] = None
    actions: tuple[NotificationAction, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "title": self.title,
            "body": self.body,
            "priority": self.priority,
            "tap_action": self.tap_action,
            "actions": [
                {"label": action.label, "action": action.action}
                for action in self.actions
            ],
        }


class Notifier(Protocol):
    """Presents the single ongoing notification and transient pushes."""
    def show_ongoing(self, notification: Notification) -> None:
        ...

    def push(self, notification: Notification) -> None:
        ...

    def clear(self) -> None:
        ...
