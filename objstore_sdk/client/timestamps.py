# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Timestamp handling for operation inputs.

Functions:
    parse_timestamp: Convert a datetime or a date string into a datetime.
    format_rfc822: Format a datetime for RFC 822 date headers.
"""
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Union

from .exceptions import InvalidInputError

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

def parse_timestamp(value: Union[datetime, str]) -> datetime:
    """
    Parse a timestamp input.

    Accepts a datetime (returned unchanged), an ISO 8601 string, an RFC 2822
    date string or ``@<epoch seconds>``. Relative forms such as ``now`` or
    ``+1 day`` are rejected.

    Args:
        value (Union[datetime, str]): The value to parse.

    Returns:
        datetime: The parsed timestamp.

    Raises:
        InvalidInputError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f'Invalid timestamp "{value}".')

    text = value.strip()
    if text.startswith("@"):
        try:
            return datetime.fromtimestamp(float(text[1:]), tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as e:
            raise InvalidInputError(f'Invalid timestamp "{value}".') from e

    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError) as e:
        raise InvalidInputError(f'Invalid timestamp "{value}".') from e

def format_rfc822(value: datetime) -> str:
    """
    Format a datetime as an RFC 822 date, e.g. ``Mon, 15 Aug 05 15:52:01 +0000``.

    Day and month names are always English. Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return "%s, %02d %s %s %s" % (
        _DAYS[value.weekday()],
        value.day,
        _MONTHS[value.month - 1],
        value.strftime("%y %H:%M:%S"),
        value.strftime("%z"),
    )
