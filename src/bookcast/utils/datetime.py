"""Datetime helpers.

Feed timestamps are always timezone-aware so RFC 1123 formatting can
emit a numeric zone.
"""

from datetime import datetime, timezone
from email.utils import format_datetime


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime, truncated to seconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def format_rfc1123(dt: datetime) -> str:
    """Format an aware datetime as RFC 1123 with a numeric zone.

    Example:
        >>> format_rfc1123(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
        'Mon, 01 Jan 2024 12:00:00 +0000'

    Raises:
        ValueError: If ``dt`` is naive
    """
    if dt.tzinfo is None:
        raise ValueError("RFC 1123 dates require a timezone-aware datetime")
    return format_datetime(dt)
