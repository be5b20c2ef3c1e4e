"""
Gateway Utility Module
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Fixed English month abbreviations; strftime("%b") follows the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def create_unique_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid.uuid4())


def format_to_clf_time(millis: int) -> str:
    """
    Format an epoch-millisecond timestamp in Common Log Format.

    Example: 1700000000000 -> "14/Nov/2023:22:13:20 +0000"
    """
    dt = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    return (
        f"{dt.day:02d}/{_MONTHS[dt.month - 1]}/{dt.year:04d}:"
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} +0000"
    )


def null_if_empty(mapping: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a copy of mapping, or None when it has no entries."""
    if not mapping:
        return None
    return dict(mapping)
