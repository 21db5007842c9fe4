"""Clock helpers — timezone-aware UTC timestamps.

Invariants:
    - Domain code only compares aware datetimes
    - Naive values (SQLite drops tzinfo on read) are interpreted as UTC
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
