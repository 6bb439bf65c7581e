"""Timestamp parsing utilities for photo capture dates."""

from datetime import datetime, timezone

from photostats.contexts.extraction.exceptions import MalformedDateError


def parse_date_taken(value: str) -> datetime:
    """
    Parse a `date_taken` string into an aware datetime.

    Accepts ISO 8601 forms such as "2016-06-26T11:02:13-08:00",
    "2016-06-26 11:02:13" and "2016-06-26". Values without an offset are
    read as UTC so that every parsed value is comparable with every other.

    Args:
        value: Raw date string from a photo record

    Returns:
        Timezone-aware datetime

    Raises:
        MalformedDateError: If the value is not a string or cannot be parsed

    Examples:
        parse_date_taken("2016-06-26T11:02:13-08:00")
        # datetime(2016, 6, 26, 11, 2, 13, tzinfo=UTC-08:00)

        parse_date_taken("2016-06-26")
        # datetime(2016, 6, 26, 0, 0, tzinfo=UTC)
    """
    if not isinstance(value, str):
        raise MalformedDateError(value)

    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise MalformedDateError(value) from e

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt

