"""Time and datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def format_datetime(dt: datetime) -> str:
    """Format datetime as an ISO 8601 string with offset.

    Naive datetimes are assumed to be UTC.

    Args:
        dt: Datetime to format

    Returns:
        ISO 8601 string, microseconds preserved
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


def parse_datetime(dt_str: str) -> datetime:
    """Parse ISO datetime string.

    Args:
        dt_str: ISO format datetime string ("Z" suffix accepted)

    Returns:
        Parsed datetime object in UTC
    """
    formats = [
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%d",
    ]

    for fmt in formats:
        try:
            return datetime.strptime(dt_str, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue

    try:
        dt = datetime.fromisoformat(dt_str)
    except ValueError:
        raise ValueError(f"Could not parse datetime: {dt_str}") from None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def coerce_datetime(value: datetime | str | None) -> datetime:
    """Turn a raw timestamp field into an aware UTC datetime.

    Missing or unparseable values fall back to the current time.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, str) and value:
        try:
            return parse_datetime(value)
        except ValueError:
            return utc_now()
    return utc_now()
