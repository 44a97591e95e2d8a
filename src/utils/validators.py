"""Lightweight validation and normalisation helpers."""

from typing import Any, List


def ensure_present(value: Any, field: str) -> None:
    """Raise ValueError if value is falsy."""
    if value in (None, "", []):
        raise ValueError(f"{field} is required")


def ensure_event_ids(value: Any, allow_blank: bool = True) -> List[Any]:
    """
    Validate a caller-supplied list of event identifiers.

    The list itself must be non-empty. With ``allow_blank`` the entries may be
    falsy (callers skip them); any other entry must be a
    non-empty string.
    """
    if not isinstance(value, list):
        raise ValueError("eventIds must be an array")
    ensure_present(value, "eventIds")
    for entry in value:
        if allow_blank and not entry:
            continue
        if not isinstance(entry, str) or not entry:
            raise ValueError("eventIds entries must be non-empty strings")
    return value


def searchable(value: Any) -> str:
    """Lower-cased string form of a stored field; missing fields become ``""``."""
    if value is None:
        return ""
    return str(value).lower()
