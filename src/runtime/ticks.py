"""Bridge that turns published timer states into bus events."""

from __future__ import annotations

import logging
from typing import Optional

from bus import CompletedEvent, EventBus, TickEvent
from tasktimer import TimerState


class TickBridge:
    """Emits a tick for every active state and a completion when a task ends."""

    def __init__(self, bus: EventBus, logger: Optional[logging.Logger] = None):
        self._bus = bus
        self._logger = logger or logging.getLogger("runtime.ticks")
        self._was_active = False

    def handle_state(self, state: TimerState) -> None:
        if state.is_active:
            self._was_active = True
            self._bus.publish_event(
                TickEvent(
                    remaining_millis=state.remaining_millis,
                    is_overtime=state.is_overtime,
                    overtime_millis=state.overtime_millis,
                )
            )
            return

        if self._was_active:
            self._was_active = False
            self._logger.debug("Task left the active modes; publishing completion")
            self._bus.publish_event(CompletedEvent())
