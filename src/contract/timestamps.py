"""
Date-time formats used on the wire.

The provider accepts a local date-time (no offset) in the ``validDate`` query
parameter and answers with the current time carrying a full ``±HH:MM`` offset,
for example ``2024-01-01T10:00:00+10:00``.
"""

import re
from datetime import datetime

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# ISO-8601 local date-time: seconds and up to nanosecond fractions are optional
_LOCAL_DATETIME = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,9})?)?")


def format_offset_timestamp(value: datetime) -> str:
    """
    Format an aware datetime as ``YYYY-MM-DDTHH:MM:SS±HH:MM``.

    :param value: Timezone-aware datetime. Microseconds are dropped.
    :returns: The formatted timestamp.
    :raises ValueError: If ``value`` is naive.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Timestamp must carry a timezone offset")
    return value.replace(microsecond=0).isoformat(timespec="seconds")


def parse_offset_timestamp(value: str) -> datetime:
    """
    Parse a timestamp produced by :func:`format_offset_timestamp`.

    :param value: Timestamp string, e.g. ``2013-08-16T15:31:20+10:00``.
    :returns: A timezone-aware datetime.
    :raises ValueError: If the string does not match :data:`DATE_FORMAT`.
    """
    return datetime.strptime(value, DATE_FORMAT)


def parse_local_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 local date-time such as ``2024-01-01T10:00:00``.

    Seconds and fractional seconds are optional. Date-only values and values
    carrying an offset are rejected.

    :param value: The string to parse.
    :returns: A naive datetime.
    :raises ValueError: If ``value`` is not a local date-time.
    """
    if not _LOCAL_DATETIME.fullmatch(value):
        raise ValueError(f"{value!r} is not a local date-time")
    return datetime.fromisoformat(value)
