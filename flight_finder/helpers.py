"""Helper functions for common operations.

Functions Overview:
-------------------

parse_iso_timestamp(timestamp_str)
    Parse ISO 8601 timestamp strings into timezone-aware datetime objects.
    Handles Zulu time (Z suffix) and timezone offsets; naive values are UTC.

    Example:
        >>> dt = parse_iso_timestamp("2025-03-15T14:30:00Z")
        >>> dt.year, dt.month, dt.day
        (2025, 3, 15)

parse_epoch_timestamp(seconds)
    Convert Unix epoch seconds into a UTC datetime.

format_iso_timestamp(dt)
    Format a datetime as ISO 8601 UTC with a Z suffix (None passes through).

    Example:
        >>> format_iso_timestamp(parse_iso_timestamp("2025-03-15T16:30:00+02:00"))
        '2025-03-15T14:30:00Z'

format_flight_time(total_seconds)
    Format duration as human-readable string (e.g., "2h 30m").
"""

from datetime import datetime, timezone
from typing import Optional
from .constants import SECONDS_PER_HOUR

__all__ = [
    'parse_iso_timestamp',
    'parse_epoch_timestamp',
    'format_iso_timestamp',
    'format_flight_time',
]


def parse_iso_timestamp(timestamp_str: str) -> Optional[datetime]:
    """
    Parse ISO format timestamp string to datetime object.

    Args:
        timestamp_str: Timestamp string in ISO format (e.g., "2025-03-03T08:58:01Z")

    Returns:
        Timezone-aware datetime or None if parsing fails
    """
    if not isinstance(timestamp_str, str) or 'T' not in timestamp_str:
        return None

    try:
        dt = datetime.fromisoformat(timestamp_str.replace('Z', '+00:00'))
    except (ValueError, TypeError):
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_epoch_timestamp(seconds: float) -> Optional[datetime]:
    """
    Convert Unix epoch seconds to a UTC datetime.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00Z

    Returns:
        datetime or None if the value is out of range
    """
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def format_iso_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """
    Format datetime as ISO 8601 in UTC.

    Args:
        dt: datetime to format (naive values are taken as UTC)

    Returns:
        String like "2025-03-15T14:30:00Z", or None for None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def format_flight_time(seconds: float) -> str:
    """
    Format flight time in seconds to human-readable string.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted string like "2h 15m" or "45m"
    """
    if seconds <= 0:
        return "---"

    hours = int(seconds // SECONDS_PER_HOUR)
    minutes = int((seconds % SECONDS_PER_HOUR) // 60)

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
