"""Timezone utilities.

Single source of truth for datetime literals emitted into queries.
Output never depends on the process-local timezone: naive datetimes are
read as UTC rather than local time.
"""

from datetime import UTC, datetime

__all__ = [
    "to_utc",
    "format_iso_utc",
    "kql_datetime",
]


def to_utc(dt: datetime) -> datetime:
    """Convert any datetime to UTC.

    Args:
        dt: Datetime to convert (naive values are taken to be UTC already)

    Returns:
        Datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_iso_utc(dt: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision.

    e.g. '2024-03-01T09:30:00.250Z' (microseconds are truncated, not rounded)

    Args:
        dt: Datetime to format (will be converted to UTC)

    Returns:
        ISO-8601 string with a trailing 'Z'
    """
    return to_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def kql_datetime(dt: datetime) -> str:
    """Wrap a datetime as a KQL datetime literal: datetime(<iso>)."""
    return f"datetime({format_iso_utc(dt)})"
