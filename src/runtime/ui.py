from __future__ import annotations

from typing import Any, Optional, Protocol

from bus import CompletedEvent, TickEvent, TimerEvent
from contracts.ui_protocol import (
    EVENT_COMPLETED,
    EVENT_NOTIFICATION,
    EVENT_PUSH,
    EVENT_TICK,
    EVENT_UI_STATE,
)
from notifier import Notification
from tasktimer.messages import format_time
from ui_state import UIStateSnapshot


class UIServerLike(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...


class RuntimeUIPublisher:
    """Serializes timer traffic into websocket events."""

    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_ui_state(self, snapshot: UIStateSnapshot) -> None:
        payload: dict[str, Any] = {
            "screen": snapshot.screen,
            "remaining_millis": snapshot.remaining_millis,
            "is_overtime": snapshot.is_overtime,
            "overtime_millis": snapshot.overtime_millis,
            "time_text": (
                f"+{format_time(snapshot.overtime_millis)}"
                if snapshot.is_overtime
                else format_time(snapshot.remaining_millis)
            ),
        }
        if snapshot.task is not None:
            payload["task"] = {
                "name": snapshot.task.name,
                "category": snapshot.task.category,
                "duration_millis": snapshot.task.duration_millis,
            }
        self.publish(EVENT_UI_STATE, **payload)

    def publish_timer_event(self, event: TimerEvent) -> None:
        if isinstance(event, TickEvent):
            self.publish(
                EVENT_TICK,
                remaining_millis=event.remaining_millis,
                is_overtime=event.is_overtime,
                overtime_millis=event.overtime_millis,
            )
        elif isinstance(event, CompletedEvent):
            self.publish(EVENT_COMPLETED)

    def publish_notification(self, notification: Notification) -> None:
        self.publish(EVENT_NOTIFICATION, **notification.to_payload())

    def publish_push(self, notification: Notification) -> None:
        self.publish(EVENT_PUSH, **notification.to_payload())


class UINotifier:
    """Notifier that mirrors notifications to websocket clients."""

    def __init__(self, publisher: RuntimeUIPublisher):
        self._publisher = publisher

    def show_ongoing(self, notification: Notification) -> None:
        self._publisher.publish_notification(notification)

    def push(self, notification: Notification) -> None:
        self._publisher.publish_push(notification)

    def clear(self) -> None:
        self._publisher.publish(EVENT_NOTIFICATION, kind="cleared")
