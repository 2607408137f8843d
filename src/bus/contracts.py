"""Command and event shapes exchanged between the UI layer and the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from notifier.constants import (
    NOTIFICATION_ACTION_COMPLETE,
    NOTIFICATION_ACTION_SHOW_TIMER,
)


@dataclass(frozen=True)
class StartCommand:
    """Start (or replace) the active task."""
    name: str
    category: str
    duration_millis: int


@dataclass(frozen=True)
class CompleteRequested:
    """The user finished the active task."""


@dataclass(frozen=True)
class ShowTimerRequested:
    """The user asked to bring the timer screen forward."""


@dataclass(frozen=True)
class TickEvent:
    """Periodic timer update for listening UIs."""
    remaining_millis: int
    is_overtime: bool
    overtime_millis: int


@dataclass(frozen=True)
class CompletedEvent:
    """The active task was completed and the timer returned to idle."""


Command = StartCommand | CompleteRequested | ShowTimerRequested
TimerEvent = TickEvent | CompletedEvent


def command_for_action(action: Optional[str]) -> Optional[Command]:
    """Translate a notification tap/action identifier into a bus command."""
    if action == NOTIFICATION_ACTION_COMPLETE:
        return CompleteRequested()
    if action == NOTIFICATION_ACTION_SHOW_TIMER:
        return ShowTimerRequested()
    return None
