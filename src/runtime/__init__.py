"""Runtime engine exports."""

from .commands import CommandDispatcher
from .console import ConsoleCommandReader, parse_console_line
from .loop import RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from .ticks import TickBridge
from .ui import RuntimeUIPublisher, UINotifier

__all__ = [
    "CommandDispatcher",
    "ConsoleCommandReader",
    "RuntimeBootstrap",
    "RuntimeEngine",
    "RuntimeHooks",
    "RuntimeUIPublisher",
    "TickBridge",
    "UINotifier",
    "parse_console_line",
]
