from .config import TimerConfigurationError, TimerSettings
from .models import Task, TaskCategory, TimerMode, TimerState
from .schedule import ReminderSchedule
from .service import TimerEngine

__all__ = [
    "ReminderSchedule",
    "Task",
    "TaskCategory",
    "TimerConfigurationError",
    "TimerEngine",
    "TimerMode",
    "TimerSettings",
    "TimerState",
]
