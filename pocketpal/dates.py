"""Date utilities for PocketPal.

Timestamps are stored with minute precision. User supplied dates are parsed
leniently with pandas (day-first, so 03/04/2025 is the 3rd of April).
"""

from datetime import datetime

import pandas as pd

from pocketpal.exceptions import InvalidDateError

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"


def format_timestamp(timestamp: datetime | None) -> str:
    """Format a timestamp for storage and display. None becomes an empty string."""
    if timestamp is None:
        return ""
    return timestamp.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime | None:
    """Parse a stored timestamp.

    Args:
        value: Timestamp in DD/MM/YYYY HH:MM format, or an empty string.

    Returns:
        The timestamp, or None for an empty string.

    Raises:
        InvalidDateError: If the value does not match the storage format.
    """
    value = value.strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidDateError(f"Could not parse timestamp '{value}'") from e


def now() -> datetime:
    """Current local time truncated to the minute, the precision that gets stored."""
    return datetime.now().replace(second=0, microsecond=0)


def parse_user_date(value: str, end_of_day: bool = False) -> datetime:
    """Parse a date typed by the user.

    Args:
        value: Date such as 2025-01-15, 15/01/2025 or 15/01/2025 18:30.
        end_of_day: When the value carries no time, move it to the last
            moment of that day. Used for inclusive upper bounds.

    Returns:
        Naive datetime.

    Raises:
        InvalidDateError: If pandas cannot make sense of the value.
    """
    try:
        parsed = pd.to_datetime(value, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Could not parse date '{value}'") from e
    if pd.isna(parsed):
        raise InvalidDateError(f"Could not parse date '{value}'")

    dt = parsed.to_pydatetime().replace(tzinfo=None)
    if end_of_day and ":" not in value:
        dt = dt.replace(hour=23, minute=59, second=59, microsecond=999999)
    return dt
