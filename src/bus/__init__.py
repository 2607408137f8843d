"""In-process event bus between the timer engine and UI layers."""

from .channel import Channel
from .contracts import (
    Command,
    CompletedEvent,
    CompleteRequested,
    ShowTimerRequested,
    StartCommand,
    TickEvent,
    TimerEvent,
    command_for_action,
)
from .service import EventBus

__all__ = [
    "Channel",
    "Command",
    "CompletedEvent",
    "CompleteRequested",
    "EventBus",
    "ShowTimerRequested",
    "StartCommand",
    "TickEvent",
    "TimerEvent",
    "command_for_action",
]
