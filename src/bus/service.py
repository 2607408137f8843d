"""Typed in-process publish/subscribe channel between engine and UI."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .channel import Channel
from .contracts import Command, TimerEvent


class EventBus:
    """Commands flow UI -> engine, events flow engine -> UI."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("bus")
        self._commands: Channel[Command] = Channel("command", self._logger)
        self._events: Channel[TimerEvent] = Channel("event", self._logger)

    def subscribe_commands(
        self,
        handler: Callable[[Command], None],
    ) -> Callable[[], None]:
        return self._commands.subscribe(handler)

    def subscribe_events(
        self,
        handler: Callable[[TimerEvent], None],
    ) -> Callable[[], None]:
        return self._events.subscribe(handler)

    def send_command(self, command: Command) -> None:
        if self._commands.listener_count == 0:
            self._logger.warning(
                "Dropping %s: no command handler registered",
                type(command).__name__,
            )
            return
        self._logger.debug("Command: %s", command)
        self._commands.publish(command)

    def publish_event(self, event: TimerEvent) -> None:
        self._events.publish(event)
