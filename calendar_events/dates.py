"""
Conversion between Python dates and Google Calendar date strings.

All-day boundaries use ``YYYY-MM-DD``; timed boundaries use RFC 3339.
"""

from datetime import date, datetime, time, timezone
from typing import Union

from dateutil.parser import isoparse

DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[date, datetime, str]


def parse_date(date_str: str) -> date:
    """
    Parse an all-day date string.

    Raises:
        ValueError: If the string is not YYYY-MM-DD
    """
    parsed = datetime.strptime(date_str, DATE_FORMAT).date()
    # strptime also accepts unpadded months and days
    if parsed.isoformat() != date_str:
        raise ValueError(f"Date '{date_str}' does not match YYYY-MM-DD")
    return parsed


def parse_datetime(dt_str: str) -> datetime:
    """
    Parse an RFC 3339 timestamp.

    Naive results are assumed to be UTC.

    Raises:
        ValueError: If the string is not a valid timestamp
    """
    dt = isoparse(dt_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(value: DateLike) -> str:
    """
    Format a date (or the date part of a datetime) as YYYY-MM-DD.

    Strings must be a YYYY-MM-DD date or a full RFC 3339 timestamp.
    """
    if isinstance(value, str):
        if len(value) == len("YYYY-MM-DD"):
            value = parse_date(value)
        else:
            value = parse_datetime(value).date()
    elif isinstance(value, datetime):
        value = value.date()
    elif not isinstance(value, date):
        raise TypeError(f"Expected a date, got {type(value).__name__}")
    return value.strftime(DATE_FORMAT)


def format_datetime(value: DateLike) -> str:
    """
    Format a datetime as RFC 3339, to whole seconds.

    The UTC offset of aware datetimes is kept; naive datetimes and plain
    dates are taken as UTC (dates at midnight).
    """
    if isinstance(value, str):
        value = parse_datetime(value)
    elif isinstance(value, datetime):
        pass
    elif isinstance(value, date):
        value = datetime.combine(value, time.min)
    else:
        raise TypeError(f"Expected a datetime, got {type(value).__name__}")

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return value.replace(microsecond=0).isoformat()
