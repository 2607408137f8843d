"""Routes UI commands from the bus to the timer engine."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from bus import Command, CompleteRequested, ShowTimerRequested, StartCommand


class TimerEngineLike(Protocol):
    def start(self, name: str, category: str, duration_millis: int) -> None:
        ...

    def complete(self) -> None:
        ...

    def enter_idle_mode(self) -> None:
        ...


class CommandDispatcher:
    def __init__(self, engine: TimerEngineLike, logger: Optional[logging.Logger] = None):
        self._engine = engine
        self._logger = logger or logging.getLogger("runtime.commands")

    def handle_command(self, command: Command) -> None:
        if isinstance(command, StartCommand):
            self._engine.start(command.name, command.category, command.duration_millis)
            return

        if isinstance(command, CompleteRequested):
            # Completion and idle reminders are separate engine steps.
            self._engine.complete()
            self._engine.enter_idle_mode()
            return

        if isinstance(command, ShowTimerRequested):
            self._logger.debug("Show timer requested; no engine change")
            return

        self._logger.warning("Ignoring unknown command type: %s", type(command).__name__)
