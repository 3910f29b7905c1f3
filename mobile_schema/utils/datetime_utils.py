"""
Timezone-aware datetime utilities.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Get current UTC time with timezone awareness."""
    return datetime.now(timezone.utc)


def to_iso_string(dt: Optional[datetime] = None) -> str:
    """
    Convert datetime to ISO 8601 string with Z suffix.

    Args:
        dt: Datetime object (defaults to now)

    Returns:
        ISO 8601 formatted string ending with 'Z'

    Example:
        >>> to_iso_string(datetime(2025, 1, 15, 10, 30, 45, 123000))
        '2025-01-15T10:30:45.123Z'
    """
    if dt is None:
        dt = utc_now()

    # Naive datetimes are taken as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    iso_str = dt.isoformat(timespec='milliseconds')
    if iso_str.endswith('+00:00'):
        return iso_str[:-6] + 'Z'
    return iso_str
