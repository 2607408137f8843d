"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSectionSettings:
    """Timer engine intervals from `[timer]`."""
    tick_interval_ms: int = 1000
    idle_reminder_interval_ms: int = 180_000
    overtime_push_interval_ms: int = 180_000
    start_in_idle_mode: bool = True


@dataclass(frozen=True)
class NotifierSettings:
    """Notification backends from `[notifier]`."""
    log_enabled: bool = True
    desktop_enabled: bool = False
    app_name: str = "What To Do Next"
    push_timeout_seconds: int = 10


@dataclass(frozen=True)
class UIServerSettings:
    """Built-in UI server settings from `[ui_server]`."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = ""


@dataclass(frozen=True)
class ConsoleSettings:
    """Stdin command surface from `[console]`."""
    enabled: bool = True


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    timer: TimerSectionSettings
    notifier: NotifierSettings
    ui_server: UIServerSettings
    console: ConsoleSettings
    logging: LoggingSettings
    source_file: str
