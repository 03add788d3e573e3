"""Presence validation for article fields — pure functions, no framework dependencies."""

from collections.abc import Mapping
from typing import Any

REQUIRED_FIELDS = ("title", "content")
BLANK_MESSAGE = "can't be blank"


def is_blank(value: Any) -> bool:
    """A value is blank when it is None or a string that is empty after trimming."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def presence_errors(fields: Mapping[str, Any]) -> dict[str, list[str]]:
    """Return ``{field: [message]}`` for every required field that is blank."""
    return {
        name: [BLANK_MESSAGE]
        for name in REQUIRED_FIELDS
        if is_blank(fields.get(name))
    }


def validate(fields: Mapping[str, Any]) -> bool:
    return not presence_errors(fields)
