"""Task timer state machine: countdown, overtime tracking, idle reminders."""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Callable, Optional

from bus import Channel
from clock import Clock
from notifier import Notification, Notifier

from . import transitions
from .config import TimerSettings
from .constants import (
    CATEGORIES,
    CONCERN_COUNTDOWN,
    CONCERN_IDLE_PUSH,
    CONCERN_OVERTIME_PUSH,
    CONCERN_OVERTIME_TICK,
    DEFAULT_CATEGORY,
    MODE_OVERTIME,
    MODE_RUNNING,
)
from .messages import (
    IdleMessageRotation,
    idle_ongoing_notification,
    idle_reminder_notification,
    ongoing_notification,
    overtime_notification,
    target_reached_notification,
)
from .models import Task, TaskCategory, TimerState
from .schedule import ReminderSchedule

StateListener = Callable[[TimerState], None]


class TimerEngine:
    """Owns the active task and drives every timed behaviour.

    All entry points and scheduled callbacks are expected to run on the
    clock's single scheduling timeline, so the engine holds no locks.
    """

    def __init__(
        self,
        clock: Clock,
        notifier: Optional[Notifier] = None,
        *,
        settings: Optional[TimerSettings] = None,
        logger: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None,
    ):
        self._clock = clock
        self._notifier = notifier
        self._settings = settings or TimerSettings()
        self._logger = logger or logging.getLogger("tasktimer")
        self._schedule = ReminderSchedule(clock, self._logger.getChild("schedule"))
        self._idle_messages = IdleMessageRotation(rng=rng)
        self._states: Channel[TimerState] = Channel("state", self._logger)

        self._state = transitions.idle_state()
        self._last_published: Optional[TimerState] = None
        self._deadline_millis = 0
        self._overtime_started_at_millis: Optional[int] = None

    @property
    def settings(self) -> TimerSettings:
        return self._settings

    @property
    def schedule(self) -> ReminderSchedule:
        return self._schedule

    def get_state(self) -> TimerState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Receive every published state, in publish order."""
        return self._states.subscribe(listener)

    def start(self, name: str, category: Any, duration_millis: Any) -> None:
        """Start a task, replacing whatever was running or idling before."""
        self._schedule.cancel_all()

        now = self._clock.now_millis()
        task = Task(
            name=str(name) if name is not None else "",
            category=_normalize_category(category),
            target_duration_millis=_clamp_duration(duration_millis),
        )
        self._deadline_millis = now + task.target_duration_millis
        self._overtime_started_at_millis = None
        self._state = transitions.begin_task(task)
        self._logger.info(
            "Task started: name=%s category=%s duration=%sms",
            task.name,
            task.category,
            task.target_duration_millis,
        )

        self._publish()
        self._show_ongoing(ongoing_notification(self._state))
        self._schedule_countdown_tick()

    def complete(self) -> None:
        """Drop the active task and return to idle without reminders."""
        self._schedule.cancel_all()
        previous = self._state
        self._reset_to_idle()
        if previous.task is not None:
            self._logger.info(
                "Task completed: name=%s mode=%s overtime=%sms",
                previous.task.name,
                previous.mode,
                previous.overtime_millis,
            )
        self._publish()
        self._clear_notifications()

    def enter_idle_mode(self) -> None:
        """Go idle and nudge the user periodically to start something."""
        self._schedule.cancel_all()
        self._reset_to_idle()
        self._logger.info(
            "Idle mode: reminder every %sms",
            self._settings.idle_reminder_interval_millis,
        )
        self._publish()
        self._show_ongoing(idle_ongoing_notification())
        self._schedule.schedule(
            CONCERN_IDLE_PUSH,
            self._settings.idle_reminder_interval_millis,
            self._on_idle_push,
        )

    def shutdown(self) -> None:
        self._schedule.cancel_all()
        self._clear_notifications()
        self._logger.info("Timer engine stopped")

    def _reset_to_idle(self) -> None:
        self._state = transitions.idle_state()
        self._deadline_millis = 0
        self._overtime_started_at_millis = None

    def _schedule_countdown_tick(self) -> None:
        delay = transitions.next_countdown_delay(
            self._state.remaining_millis,
            self._settings.tick_interval_millis,
        )
        self._schedule.schedule(CONCERN_COUNTDOWN, delay, self._on_countdown_tick)

    def _on_countdown_tick(self) -> None:
        if self._state.mode != MODE_RUNNING:
            return

        now = self._clock.now_millis()
        self._state = transitions.countdown(
            self._state,
            deadline_millis=self._deadline_millis,
            now_millis=now,
        )
        if self._state.remaining_millis > 0:
            self._publish()
            self._show_ongoing(ongoing_notification(self._state))
            self._schedule_countdown_tick()
            return

        self._enter_overtime(now)

    def _enter_overtime(self, now: int) -> None:
        task = self._state.task
        self._overtime_started_at_millis = now
        self._state = transitions.begin_overtime(self._state)
        if task is None:
            return

        self._logger.info("Target time reached: name=%s", task.name)
        self._publish()
        self._show_ongoing(ongoing_notification(self._state))
        self._push(target_reached_notification(task))

        self._schedule.schedule(
            CONCERN_OVERTIME_TICK,
            self._settings.tick_interval_millis,
            self._on_overtime_tick,
        )
        self._schedule.schedule(
            CONCERN_OVERTIME_PUSH,
            self._settings.overtime_push_interval_millis,
            self._on_overtime_push,
        )

    def _refresh_overtime(self) -> None:
        started_at = self._overtime_started_at_millis
        if started_at is None:
            return
        self._state = transitions.overtime(
            self._state,
            started_at_millis=started_at,
            now_millis=self._clock.now_millis(),
        )

    def _on_overtime_tick(self) -> None:
        if self._state.mode != MODE_OVERTIME:
            return

        self._refresh_overtime()
        self._publish()
        self._show_ongoing(ongoing_notification(self._state))
        self._schedule.schedule(
            CONCERN_OVERTIME_TICK,
            self._settings.tick_interval_millis,
            self._on_overtime_tick,
        )

    def _on_overtime_push(self) -> None:
        task = self._state.task
        if self._state.mode != MODE_OVERTIME or task is None:
            return

        self._refresh_overtime()
        minutes = transitions.overtime_minutes(self._state.overtime_millis)
        self._logger.info("Overtime reminder: name=%s minutes=%d", task.name, minutes)
        self._publish()
        self._push(overtime_notification(task, minutes))
        self._schedule.schedule(
            CONCERN_OVERTIME_PUSH,
            self._settings.overtime_push_interval_millis,
            self._on_overtime_push,
        )

    def _on_idle_push(self) -> None:
        if self._state.is_active:
            return

        message = self._idle_messages.next_message()
        self._logger.info("Idle reminder: %s", message)
        self._push(idle_reminder_notification(message))
        self._schedule.schedule(
            CONCERN_IDLE_PUSH,
            self._settings.idle_reminder_interval_millis,
            self._on_idle_push,
        )

    def _publish(self) -> None:
        state = self._state
        if state == self._last_published:
            return
        self._last_published = state
        self._states.publish(state)

    def _show_ongoing(self, notification: Notification) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.show_ongoing(notification)
        except Exception as error:
            self._logger.warning("Ongoing notification failed: %s", error)

    def _push(self, notification: Notification) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.push(notification)
        except Exception as error:
            self._logger.warning("Push notification failed: %s", error)

    def _clear_notifications(self) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.clear()
        except Exception as error:
            self._logger.warning("Clearing notifications failed: %s", error)


def _clamp_duration(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return max(0, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, int(number))


def _normalize_category(value: Any) -> TaskCategory:
    text = str(value or "").strip().lower()
    if text in CATEGORIES:
        return text  # type: ignore[return-value]
    return DEFAULT_CATEGORY  # type: ignore[return-value]
