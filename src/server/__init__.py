"""UI server module for websocket streaming and UI commands."""

from .commands import ParsedCommand, UICommandError, parse_ui_command
from .config import ServerConfigurationError, UIServerConfig
from .service import UIServer

__all__ = [
    "ParsedCommand",
    "ServerConfigurationError",
    "UICommandError",
    "UIServerConfig",
    "UIServer",
    "parse_ui_command",
]
