"""Reactive mirror of the timer state for rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from bus import (
    Channel,
    Command,
    CompletedEvent,
    CompleteRequested,
    EventBus,
    ShowTimerRequested,
    StartCommand,
    TickEvent,
    TimerEvent,
)

Screen = Literal["input", "timer"]

SCREEN_INPUT = "input"
SCREEN_TIMER = "timer"


@dataclass(frozen=True)
class UITask:
    name: str
    category: str
    duration_millis: int


@dataclass(frozen=True)
class UIStateSnapshot:
    """What the view layer renders."""
    screen: Screen
    task: Optional[UITask]
    remaining_millis: int
    is_overtime: bool
    overtime_millis: int


_INITIAL = UIStateSnapshot(
    screen=SCREEN_INPUT,
    task=None,
    remaining_millis=0,
    is_overtime=False,
    overtime_millis=0,
)


class UIStateStore:
    """Consumes bus traffic and republishes view snapshots."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("ui_state")
        self._snapshot = _INITIAL
        self._channel: Channel[UIStateSnapshot] = Channel("ui_state", self._logger)

    @property
    def snapshot(self) -> UIStateSnapshot:
        return self._snapshot

    def subscribe(self, listener: Callable[[UIStateSnapshot], None]) -> Callable[[], None]:
        return self._channel.subscribe(listener)

    def attach(self, bus: EventBus) -> Callable[[], None]:
        unsubscribe_commands = bus.subscribe_commands(self.handle_command)
        unsubscribe_events = bus.subscribe_events(self.handle_event)

        def detach() -> None:
            unsubscribe_commands()
            unsubscribe_events()

        return detach

    def handle_command(self, command: Command) -> None:
        if isinstance(command, StartCommand):
            self.start_task(command.name, command.category, command.duration_millis)
        elif isinstance(command, ShowTimerRequested):
            self.go_to_timer()
        elif isinstance(command, CompleteRequested):
            self.complete_task()

    def handle_event(self, event: TimerEvent) -> None:
        if isinstance(event, TickEvent):
            self.update_timer(
                event.remaining_millis,
                is_overtime=event.is_overtime,
                overtime_millis=event.overtime_millis,
            )
        elif isinstance(event, CompletedEvent):
            self.complete_task()

    def start_task(self, name: str, category: str, duration_millis: int) -> None:
        duration = max(0, int(duration_millis))
        self._set(
            UIStateSnapshot(
                screen=SCREEN_TIMER,
                task=UITask(name=name, category=category, duration_millis=duration),
                remaining_millis=duration,
                is_overtime=False,
                overtime_millis=0,
            )
        )

    def update_timer(
        self,
        remaining_millis: int,
        *,
        is_overtime: bool,
        overtime_millis: int,
    ) -> None:
        current = self._snapshot
        self._set(
            UIStateSnapshot(
                screen=current.screen,
                task=current.task,
                remaining_millis=remaining_millis,
                is_overtime=is_overtime,
                overtime_millis=overtime_millis,
            )
        )

    def complete_task(self) -> None:
        self._set(_INITIAL)

    def go_to_timer(self) -> None:
        current = self._snapshot
        if current.task is None:
            self._logger.debug("Show timer ignored: no active task")
            return
        self._set(
            UIStateSnapshot(
                screen=SCREEN_TIMER,
                task=current.task,
                remaining_millis=current.remaining_millis,
                is_overtime=current.is_overtime,
                overtime_millis=current.overtime_millis,
            )
        )

    def _set(self, snapshot: UIStateSnapshot) -> None:
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        self._channel.publish(snapshot)
