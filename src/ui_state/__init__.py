from .store import (
    SCREEN_INPUT,
    SCREEN_TIMER,
    Screen,
    UIStateSnapshot,
    UIStateStore,
    UITask,
)

__all__ = [
    "SCREEN_INPUT",
    "SCREEN_TIMER",
    "Screen",
    "UIStateSnapshot",
    "UIStateStore",
    "UITask",
]
