"""Notification text builders for task, overtime, and idle reminders."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from notifier import (
    KIND_ONGOING,
    KIND_PUSH,
    NOTIFICATION_ACTION_COMPLETE,
    NOTIFICATION_ACTION_OPEN_APP,
    NOTIFICATION_ACTION_SHOW_TIMER,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    Notification,
    NotificationAction,
)

from .constants import CATEGORY_CHALLENGE, MILLIS_PER_SECOND
from .models import Task, TimerState

CHALLENGE_EMOJI = "🔥"
RECHARGE_EMOJI = "🌿"

COMPLETE_LABEL = "Complete"
TARGET_REACHED_TEXT = "⏰ Target time reached!"
SPLIT_SUGGESTION_TEXT = "💡 Anything over an hour is worth splitting into smaller pieces?"

IDLE_ONGOING_TITLE = "⏱️ Right now"
IDLE_ONGOING_TEXT = "What should we do next?"
IDLE_REMINDER_TITLE = "⏱️ Hold on!"

IDLE_REMINDER_MESSAGES: tuple[str, ...] = (
    "How will you spend this time?",
    "What do you feel like doing right now?",
    "Shall we pick the next thing to do?",
    "Challenge or recharge?",
)

_COMPLETE_ACTION = NotificationAction(COMPLETE_LABEL, NOTIFICATION_ACTION_COMPLETE)


def format_time(millis: int) -> str:
    """Format as `H:MM:SS` when there are hours, otherwise `MM:SS`."""
    total_seconds = max(0, int(millis)) // MILLIS_PER_SECOND
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def category_emoji(category: str) -> str:
    return CHALLENGE_EMOJI if category == CATEGORY_CHALLENGE else RECHARGE_EMOJI


def task_title(task: Task) -> str:
    return f"{category_emoji(task.category)} {task.name}"


def time_text(state: TimerState) -> str:
    if state.is_overtime:
        return f"overtime: +{format_time(state.overtime_millis)}"
    return f"remaining: {format_time(state.remaining_millis)}"


def ongoing_notification(state: TimerState) -> Notification:
    """Persistent notification for the current state (task or idle)."""
    if state.task is None:
        return idle_ongoing_notification()
    return Notification(
        kind=KIND_ONGOING,
        title=task_title(state.task),
        body=time_text(state),
        priority=PRIORITY_LOW,
        tap_action=NOTIFICATION_ACTION_SHOW_TIMER,
        actions=(_COMPLETE_ACTION,),
    )


def idle_ongoing_notification() -> Notification:
    return Notification(
        kind=KIND_ONGOING,
        title=IDLE_ONGOING_TITLE,
        body=IDLE_ONGOING_TEXT,
        priority=PRIORITY_LOW,
        tap_action=NOTIFICATION_ACTION_OPEN_APP,
    )


def overtime_text(minutes: int) -> str:
    return f"⏰ {minutes} min over! Complete it or move on to the next thing?"


def task_push_notification(task: Task, message: str) -> Notification:
    return Notification(
        kind=KIND_PUSH,
        title=task_title(task),
        body=message,
        priority=PRIORITY_HIGH,
        tap_action=NOTIFICATION_ACTION_COMPLETE,
        actions=(_COMPLETE_ACTION,),
    )


def target_reached_notification(task: Task) -> Notification:
    return task_push_notification(task, TARGET_REACHED_TEXT)


def overtime_notification(task: Task, minutes: int) -> Notification:
    return task_push_notification(task, overtime_text(minutes))


def idle_reminder_notification(message: str) -> Notification:
    return Notification(
        kind=KIND_PUSH,
        title=IDLE_REMINDER_TITLE,
        body=message,
        priority=PRIORITY_HIGH,
        tap_action=NOTIFICATION_ACTION_OPEN_APP,
    )


class IdleMessageRotation:
    """Shuffled rotation: every message is shown once per pass."""

    def __init__(
        self,
        messages: Sequence[str] = IDLE_REMINDER_MESSAGES,
        rng: Optional[random.Random] = None,
    ):
        if not messages:
            raise ValueError("idle reminder messages cannot be empty")
        self._messages = tuple(messages)
        self._rng = rng or random.Random()
        self._bag: list[str] = []

    def next_message(self) -> str:
        if not self._bag:
            self._bag = list(self._messages)
            self._rng.shuffle(self._bag)
        return self._bag.pop()
