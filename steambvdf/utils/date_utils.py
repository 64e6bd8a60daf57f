# steambvdf/utils/date_utils.py

"""Utility functions for turning Steam's Unix timestamps into dates.

Steam stores times (``LastPlayTime``, ``last_updated``, ...) as seconds
since the epoch. Dates are always produced in UTC so output does not
depend on the machine that parsed the file.
"""

from __future__ import annotations

from datetime import datetime, timezone

__all__ = ['datetime_to_timestamp', 'format_timestamp', 'timestamp_to_datetime']

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def timestamp_to_datetime(value) -> datetime | None:
    """Converts a Unix timestamp to a timezone-aware UTC datetime.

    Args:
        value: Seconds since the epoch (int, or a numeric string).

    Returns:
        The datetime, or None when the value is not a usable timestamp.
    """
    if isinstance(value, bool):
        return None

    try:
        ts = int(value)
    except (TypeError, ValueError):
        return None

    try:
        return datetime.fromtimestamp(ts, tz=timezone.utc)
    except (OSError, OverflowError, ValueError):
        return None

def datetime_to_timestamp(dt: datetime) -> int:
    """Converts a datetime back to whole seconds since the epoch.

    Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())

def format_timestamp(value) -> str:
    """Formats a Unix timestamp as ``YYYY-MM-DD HH:MM:SS UTC``.

    Handles multiple input types gracefully:
        - int or numeric string -> formatted date
        - datetime              -> formatted date
        - None / empty          -> empty string
        - anything else         -> returned as text, unchanged

    Args:
        value: A timestamp, a datetime, or an already-formatted string.

    Returns:
        A date string, the original text, or an empty string.
    """
    if value is None or value == "":
        return ""

    if isinstance(value, datetime):
        dt = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    else:
        dt = timestamp_to_datetime(value)
        if dt is None:
            return str(value)

    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
