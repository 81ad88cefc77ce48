"""
Utilities package for the post feed core.

This package contains reusable helpers for:
- Atom timestamp formatting
"""

from .time_utils import (
    EPOCH,
    ensure_aware,
    format_offset,
    format_timestamp,
    is_after,
)

__all__ = [
    "EPOCH",
    "ensure_aware",
    "format_offset",
    "format_timestamp",
    "is_after",
]
