"""Helpers for turning task-entry form values into engine arguments."""

from __future__ import annotations

from typing import Optional

from .constants import (
    CATEGORY_CHALLENGE,
    MILLIS_PER_MINUTE,
    SPLIT_SUGGESTION_THRESHOLD_MINUTES,
)


def parse_whole_number(text: Optional[str]) -> int:
    """Parse a non-negative integer field; anything else counts as zero."""
    if text is None:
        return 0
    stripped = str(text).strip()
    if not stripped.isdigit():
        return 0
    return int(stripped)


def total_minutes(hours_text: Optional[str], minutes_text: Optional[str]) -> int:
    return parse_whole_number(hours_text) * 60 + parse_whole_number(minutes_text)


def parse_duration_millis(hours_text: Optional[str], minutes_text: Optional[str]) -> int:
    return total_minutes(hours_text, minutes_text) * MILLIS_PER_MINUTE


def can_start(name: str, minutes: int) -> bool:
    return bool(name and name.strip()) and minutes > 0


def should_suggest_split(category: str, minutes: int) -> bool:
    """Long challenge tasks get a hint to break them into smaller pieces."""
    return category == CATEGORY_CHALLENGE and minutes > SPLIT_SUGGESTION_THRESHOLD_MINUTES
