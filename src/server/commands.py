"""Parsing of UI-originated websocket messages into bus commands."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from bus import (
    Command,
    CompleteRequested,
    ShowTimerRequested,
    StartCommand,
    command_for_action,
)
from contracts.ui_protocol import (
    COMMAND_COMPLETE,
    COMMAND_NOTIFICATION_ACTION,
    COMMAND_SHOW_TIMER,
    COMMAND_START,
)
from tasktimer.constants import CATEGORIES, MILLIS_PER_MINUTE
from tasktimer.task_input import can_start, should_suggest_split, total_minutes


class UICommandError(ValueError):
    """Raised when a UI message cannot be turned into a command."""


@dataclass(frozen=True)
class ParsedCommand:
    command: Command
    suggest_split: bool = False


def parse_ui_command(raw: str | bytes) -> ParsedCommand:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    try:
        message = json.loads(raw)
    except json.JSONDecodeError as error:
        raise UICommandError(f"Message is not valid JSON: {error.msg}") from error
    if not isinstance(message, Mapping):
        raise UICommandError("Message must be a JSON object.")

    command_type = message.get("type")
    if command_type == COMMAND_START:
        return _parse_start(message)
    if command_type == COMMAND_COMPLETE:
        return ParsedCommand(CompleteRequested())
    if command_type == COMMAND_SHOW_TIMER:
        return ParsedCommand(ShowTimerRequested())
    if command_type == COMMAND_NOTIFICATION_ACTION:
        command = command_for_action(message.get("action"))
        if command is None:
            raise UICommandError(f"Unsupported notification action: {message.get('action')!r}")
        return ParsedCommand(command)
    raise UICommandError(f"Unsupported command type: {command_type!r}")


def build_start_command(name: str, category: Any, minutes: int) -> ParsedCommand:
    """Validate task-entry values the way the input form does."""
    normalized_category = normalize_category(category)
    clean_name = _clean_name(name)
    if not can_start(clean_name, minutes):
        raise UICommandError("A task name and a duration above zero are required.")
    return ParsedCommand(
        StartCommand(
            name=clean_name,
            category=normalized_category,
            duration_millis=minutes * MILLIS_PER_MINUTE,
        ),
        suggest_split=should_suggest_split(normalized_category, minutes),
    )


def normalize_category(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text not in CATEGORIES:
        allowed = ", ".join(CATEGORIES)
        raise UICommandError(f"category must be one of: {allowed}.")
    return text


def _parse_start(message: Mapping[str, Any]) -> ParsedCommand:
    name = message.get("name")
    if not isinstance(name, str):
        raise UICommandError("name must be a string.")

    if "duration_millis" not in message:
        minutes = total_minutes(
            _as_text(message.get("hours")),
            _as_text(message.get("minutes")),
        )
        return build_start_command(name, message.get("category"), minutes)

    duration = message["duration_millis"]
    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise UICommandError("duration_millis must be a positive integer.")
    category = normalize_category(message.get("category"))
    clean_name = _clean_name(name)
    if not clean_name:
        raise UICommandError("A task name is required.")
    return ParsedCommand(
        StartCommand(name=clean_name, category=category, duration_millis=duration),
        suggest_split=should_suggest_split(category, duration // MILLIS_PER_MINUTE),
    )


def _clean_name(name: Any) -> str:
    return " ".join(str(name or "").split())


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value)
