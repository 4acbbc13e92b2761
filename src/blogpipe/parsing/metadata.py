"""Typed accessors for loosely typed front matter values."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, List, Mapping, Optional


def meta_str(data: Mapping[str, Any], *keys: str, default: str = "") -> str:
    """Return the first non-empty string (or number) among ``keys``."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, bool) or value is None:
            continue
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str) and value:
            return value
    return default


def meta_date(data: Mapping[str, Any], key: str = "date") -> Optional[str]:
    value = data.get(key)
    if isinstance(value, datetime):
        return iso_utc(value)
    if isinstance(value, date):
        return iso_utc(datetime.combine(value, time()))
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def iso_utc(value: datetime) -> str:
    """Render ``value`` as UTC with milliseconds and a ``Z`` suffix.

    Naive values are read as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    stamp = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def meta_tags(data: Mapping[str, Any], key: str = "tags") -> List[str]:
    value = data.get(key)
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None and str(item) != ""]
    return []


def parse_timestamp(value: Optional[str]) -> Optional[float]:
    """Convert an ISO-8601 date or datetime string to a POSIX timestamp.

    Naive values are read as UTC. Returns ``None`` when the value is missing
    or cannot be parsed.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()
