from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Mapping

from app_config_parser import parse_app_config
from app_config_schema import (
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    ConsoleSettings,
    LoggingSettings,
    NotifierSettings,
    TimerSectionSettings,
    UIServerSettings,
)

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "ConsoleSettings",
    "DEFAULT_CONFIG_FILE",
    "LoggingSettings",
    "NotifierSettings",
    "TimerSectionSettings",
    "UIServerSettings",
    "default_app_config",
    "load_app_config",
    "resolve_config_path",
]


def resolve_config_path(config_path: str | None = None) -> Path:
    """Resolve the config file from an argument, `APP_CONFIG_FILE`, or the cwd."""
    raw = config_path or os.getenv("APP_CONFIG_FILE") or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path


def default_app_config(source_file: str = "") -> AppConfig:
    return AppConfig(
        timer=TimerSectionSettings(),
        notifier=NotifierSettings(),
        ui_server=UIServerSettings(),
        console=ConsoleSettings(),
        logging=LoggingSettings(),
        source_file=source_file,
    )


def load_app_config(config_path: str | None = None) -> AppConfig:
    """Load and validate `config.toml`.

    A missing file is only an error when it was asked for explicitly; the
    implicit `./config.toml` falls back to built-in defaults.
    """
    explicit = bool(config_path or os.getenv("APP_CONFIG_FILE"))
    path = resolve_config_path(config_path)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return default_app_config()
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except Exception as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    if not isinstance(raw, Mapping):
        raise AppConfigurationError("Root config TOML object must be a table.")

    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))
