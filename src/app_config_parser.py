"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    ConsoleSettings,
    LoggingSettings,
    NotifierSettings,
    TimerSectionSettings,
    UIServerSettings,
)

_ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    return AppConfig(
        timer=_parse_timer_settings(_section(raw, "timer")),
        notifier=_parse_notifier_settings(_section(raw, "notifier")),
        ui_server=_parse_ui_server_settings(_section(raw, "ui_server"), base_dir=base_dir),
        console=ConsoleSettings(
            enabled=_as_bool(_section(raw, "console").get("enabled", True), "console.enabled"),
        ),
        logging=LoggingSettings(
            level=_as_log_level(_section(raw, "logging").get("level", "INFO"), "logging.level"),
        ),
        source_file=source_file,
    )


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSectionSettings:
    return TimerSectionSettings(
        tick_interval_ms=_as_positive_int(
            section.get("tick_interval_ms", 1000),
            "timer.tick_interval_ms",
        ),
        idle_reminder_interval_ms=_as_positive_int(
            section.get("idle_reminder_interval_ms", 180_000),
            "timer.idle_reminder_interval_ms",
        ),
        overtime_push_interval_ms=_as_positive_int(
            section.get("overtime_push_interval_ms", 180_000),
            "timer.overtime_push_interval_ms",
        ),
        start_in_idle_mode=_as_bool(
            section.get("start_in_idle_mode", True),
            "timer.start_in_idle_mode",
        ),
    )


def _parse_notifier_settings(section: Mapping[str, Any]) -> NotifierSettings:
    app_name = _as_str(section.get("app_name", "What To Do Next"), "notifier.app_name")
    return NotifierSettings(
        log_enabled=_as_bool(section.get("log_enabled", True), "notifier.log_enabled"),
        desktop_enabled=_as_bool(
            section.get("desktop_enabled", False),
            "notifier.desktop_enabled",
        ),
        app_name=app_name or "What To Do Next",
        push_timeout_seconds=_as_positive_int(
            section.get("push_timeout_seconds", 10),
            "notifier.push_timeout_seconds",
        ),
    )


def _parse_ui_server_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> UIServerSettings:
    index_file = _as_str(section.get("index_file", ""), "ui_server.index_file")
    return UIServerSettings(
        enabled=_as_bool(section.get("enabled", True), "ui_server.enabled"),
        host=_as_str(section.get("host", "127.0.0.1"), "ui_server.host"),
        port=_as_int(section.get("port", 8765), "ui_server.port"),
        index_file=_resolve_path(base_dir, index_file) if index_file else "",
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_positive_int(value: Any, field: str) -> int:
    number = _as_int(value, field)
    if number <= 0:
        raise AppConfigurationError(f"{field} must be greater than zero.")
    return number


def _as_log_level(value: Any, field: str) -> str:
    level = _as_str(value, field).upper()
    if level not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(_ALLOWED_LOG_LEVELS)
        raise AppConfigurationError(f"{field} must be one of: {allowed}.")
    return level


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
