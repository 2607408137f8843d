"""Pure state transitions of the task timer.

Each function takes the current snapshot plus the clock reading and returns
the next snapshot. Remaining and overtime values are always recomputed from
their anchor (deadline or overtime start) rather than decremented per tick,
so late or skipped ticks never accumulate drift.
"""

from __future__ import annotations

from .constants import (
    MILLIS_PER_MINUTE,
    MODE_IDLE,
    MODE_OVERTIME,
    MODE_RUNNING,
)
from .models import Task, TimerState

_IDLE_STATE = TimerState(
    mode=MODE_IDLE,
    task=None,
    remaining_millis=0,
    overtime_millis=0,
)


def idle_state() -> TimerState:
    return _IDLE_STATE


def begin_task(task: Task) -> TimerState:
    return TimerState(
        mode=MODE_RUNNING,
        task=task,
        remaining_millis=task.target_duration_millis,
        overtime_millis=0,
    )


def countdown(state: TimerState, *, deadline_millis: int, now_millis: int) -> TimerState:
    """Recompute the remaining time of a running task against its deadline."""
    if state.mode != MODE_RUNNING:
        return state
    remaining = max(0, deadline_millis - now_millis)
    if state.task is not None:
        remaining = min(remaining, state.task.target_duration_millis)
    return TimerState(
        mode=MODE_RUNNING,
        task=state.task,
        remaining_millis=remaining,
        overtime_millis=0,
    )


def begin_overtime(state: TimerState) -> TimerState:
    if state.task is None:
        return _IDLE_STATE
    return TimerState(
        mode=MODE_OVERTIME,
        task=state.task,
        remaining_millis=0,
        overtime_millis=0,
    )


def overtime(state: TimerState, *, started_at_millis: int, now_millis: int) -> TimerState:
    if state.mode != MODE_OVERTIME:
        return state
    return TimerState(
        mode=MODE_OVERTIME,
        task=state.task,
        remaining_millis=0,
        overtime_millis=max(0, now_millis - started_at_millis),
    )


def next_countdown_delay(remaining_millis: int, tick_interval_millis: int) -> int:
    """Delay until the next countdown tick, aligned to whole tick intervals.

    The last tick lands exactly on the deadline.
    """
    if remaining_millis <= 0:
        return 0
    partial = remaining_millis % tick_interval_millis
    return partial or tick_interval_millis


def overtime_minutes(overtime_millis: int) -> int:
    return max(0, overtime_millis) // MILLIS_PER_MINUTE
