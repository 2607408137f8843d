"""Web UI websocket event and command constants."""

from __future__ import annotations

# Websocket event types (server -> UI)
EVENT_HELLO = "hello"
EVENT_UI_STATE = "ui_state"
EVENT_TICK = "tick"
EVENT_COMPLETED = "completed"
EVENT_NOTIFICATION = "notification"
EVENT_PUSH = "push"
EVENT_SPLIT_SUGGESTION = "split_suggestion"
EVENT_ERROR = "error"

# Websocket command types (UI -> server)
COMMAND_START = "start"
COMMAND_COMPLETE = "complete"
COMMAND_SHOW_TIMER = "show_timer"
COMMAND_NOTIFICATION_ACTION = "notification_action"

STICKY_EVENT_TYPES: frozenset[str] = frozenset(
    {
        EVENT_UI_STATE,
        EVENT_TICK,
        EVENT_NOTIFICATION,
    }
)

STICKY_EVENT_ORDER: tuple[str, ...] = (
    EVENT_UI_STATE,
    EVENT_TICK,
    EVENT_NOTIFICATION,
)
