"""Immutable task and timer snapshots published by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .constants import ACTIVE_MODES, MODE_OVERTIME

TimerMode = Literal["idle", "running", "overtime"]
TaskCategory = Literal["challenge", "recharge"]


@dataclass(frozen=True)
class Task:
    """One in-progress activity; fixed once started."""
    name: str
    category: TaskCategory
    target_duration_millis: int


@dataclass(frozen=True)
class TimerState:
    """Snapshot of the engine state handed to observers."""
    mode: TimerMode
    task: Optional[Task]
    remaining_millis: int
    overtime_millis: int

    @property
    def is_active(self) -> bool:
        return self.mode in ACTIVE_MODES

    @property
    def is_overtime(self) -> bool:
        return self.mode == MODE_OVERTIME
