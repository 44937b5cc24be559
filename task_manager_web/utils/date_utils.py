"""
Date/time utilities
All timestamp parsing and formatting should go through this module
"""

import re
from datetime import datetime, timezone
from typing import Optional
from task_manager_web.config.constants import DISPLAY_DATETIME_FORMAT, INPUT_DATETIME_FORMAT

# Fractional seconds of any width, e.g. ".1" or ".123456789"
_FRACTION_RE = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def utc_now_iso() -> str:
    """
    Get current UTC time as ISO-8601 with millisecond precision

    Example: "2026-02-01T10:00:00.123Z"
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a backend timestamp

    Timezone-aware values are converted to local time; naive values
    (the backend's LocalDateTime) are taken as already local.

    Args:
        value: ISO-8601 string, optionally ending in "Z"

    Returns:
        Local datetime, or None if the value cannot be parsed
    """
    if not value or not isinstance(value, str):
        return None

    try:
        dt = datetime.fromisoformat(_normalize_fraction(value.strip().replace("Z", "+00:00")))
    except ValueError:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def format_datetime_for_display(value: Optional[str]) -> str:
    """Format timestamp for the task list, e.g. "01/02/2026, 10:00"; raw string if unparseable"""
    dt = parse_datetime(value)
    if dt is None:
        return value or ""
    return dt.strftime(DISPLAY_DATETIME_FORMAT)


def format_datetime_for_input(value: Optional[str]) -> str:
    """Format timestamp for a datetime-local input ("YYYY-MM-DDTHH:mm"); "" if unparseable"""
    dt = parse_datetime(value)
    if dt is None:
        return ""
    return dt.strftime(INPUT_DATETIME_FORMAT)


def _normalize_fraction(value: str) -> str:
    """Pad or truncate fractional seconds to the 6 digits fromisoformat accepts"""
    return _FRACTION_RE.sub(
        lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", value, count=1
    )
