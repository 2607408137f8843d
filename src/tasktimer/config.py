"""Validated interval configuration for the timer engine."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_IDLE_REMINDER_INTERVAL_MILLIS,
    DEFAULT_OVERTIME_PUSH_INTERVAL_MILLIS,
    DEFAULT_TICK_INTERVAL_MILLIS,
)


class TimerConfigurationError(Exception):
    """Raised when timer intervals are invalid."""


@dataclass(frozen=True)
class TimerSettings:
    tick_interval_millis: int = DEFAULT_TICK_INTERVAL_MILLIS
    idle_reminder_interval_millis: int = DEFAULT_IDLE_REMINDER_INTERVAL_MILLIS
    overtime_push_interval_millis: int = DEFAULT_OVERTIME_PUSH_INTERVAL_MILLIS

    def __post_init__(self) -> None:
        for field_name in (
            "tick_interval_millis",
            "idle_reminder_interval_millis",
            "overtime_push_interval_millis",
        ):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise TimerConfigurationError(
                    f"{field_name} must be a positive integer, got: {value!r}"
                )

    @classmethod
    def from_settings(cls, settings) -> "TimerSettings":
        return cls(
            tick_interval_millis=settings.tick_interval_ms,
            idle_reminder_interval_millis=settings.idle_reminder_interval_ms,
            overtime_push_interval_millis=settings.overtime_push_interval_ms,
        )
