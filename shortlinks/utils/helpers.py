"""Helper utilities shared by the client modules.

Functions:
    as_utc(value: datetime) -> datetime
        Attach UTC to naive datetimes, convert aware ones to UTC
    parse_timestamp(value: str | None) -> datetime | None
        Parse an RFC 3339 timestamp sent by the link service
    format_timestamp(value: datetime | None) -> str | None
        Render a datetime the way the link service expects it

Example:
    >>> from shortlinks.utils.helpers import parse_timestamp, format_timestamp
    >>> parse_timestamp('2024-06-01T12:00:00Z')
    datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)
    >>> format_timestamp(parse_timestamp('2024-06-01T12:00:00Z'))
    '2024-06-01T12:00:00Z'
"""

from datetime import datetime, UTC


def as_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC, treating naive values as UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware UTC datetime

    Go's encoder may emit up to nine fractional digits; anything beyond
    microseconds is truncated by `datetime.fromisoformat`.

    Args:
        value (str | None):
            Timestamp string, e.g. '2024-06-01T12:00:00.123456789Z'.

    Returns:
        datetime | None: aware UTC datetime, or None for empty values.

    Raises:
        ValueError:
            If the string is not a valid ISO 8601 timestamp.
    """
    if not value:
        return None
    return as_utc(datetime.fromisoformat(value))


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return as_utc(value).isoformat().replace('+00:00', 'Z')

