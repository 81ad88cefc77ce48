"""Timestamp helpers for Atom date constructs.

Atom dates are rendered as ``YYYY-MM-DDTHH:MM:SS±HH:MM``: always a numeric
offset, never ``Z``, and no fractional seconds.
"""

from __future__ import annotations

from datetime import datetime, timezone

# Starting point for the feed-level "updated" accumulator.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Return the datetime unchanged, or pinned to UTC when naive."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_offset(value: datetime) -> str:
    """Render the UTC offset of an aware datetime as ``±HH:MM``."""
    seconds = int(value.utcoffset().total_seconds())
    sign = "-" if seconds < 0 else "+"
    # Sub-minute offsets are truncated
    hours, remainder = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def format_timestamp(value: datetime) -> str:
    """Format a datetime in its own offset for Atom output."""
    value = ensure_aware(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{format_offset(value)}"
    )


def is_after(candidate: datetime, current: datetime) -> bool:
    """True when candidate is strictly later than current."""
    return ensure_aware(candidate) > ensure_aware(current)
