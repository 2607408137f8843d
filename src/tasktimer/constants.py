"""Mode, category, concern, and interval constants used by the timer engine."""

from __future__ import annotations

MODE_IDLE = "idle"
MODE_RUNNING = "running"
MODE_OVERTIME = "overtime"

ACTIVE_MODES: frozenset[str] = frozenset({MODE_RUNNING, MODE_OVERTIME})

CATEGORY_CHALLENGE = "challenge"
CATEGORY_RECHARGE = "recharge"

CATEGORIES: tuple[str, ...] = (CATEGORY_CHALLENGE, CATEGORY_RECHARGE)
DEFAULT_CATEGORY = CATEGORY_CHALLENGE

CONCERN_COUNTDOWN = "countdown"
CONCERN_OVERTIME_TICK = "overtime_tick"
CONCERN_OVERTIME_PUSH = "overtime_push"
CONCERN_IDLE_PUSH = "idle_push"

ALL_CONCERNS: tuple[str, ...] = (
    CONCERN_COUNTDOWN,
    CONCERN_OVERTIME_TICK,
    CONCERN_OVERTIME_PUSH,
    CONCERN_IDLE_PUSH,
)

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND

DEFAULT_TICK_INTERVAL_MILLIS = MILLIS_PER_SECOND
DEFAULT_IDLE_REMINDER_INTERVAL_MILLIS = 3 * MILLIS_PER_MINUTE
DEFAULT_OVERTIME_PUSH_INTERVAL_MILLIS = 3 * MILLIS_PER_MINUTE

SPLIT_SUGGESTION_THRESHOLD_MINUTES = 60
