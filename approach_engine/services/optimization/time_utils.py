"""Shared date semantics for the optimization engines.

Every component goes through these helpers so that day differences, hour and
weekday extraction mean the same thing everywhere:

- ``calendar_days_between`` compares UTC calendar dates and ignores time of day.
- ``hour_of_day`` and ``day_of_week`` read the wall clock of the timestamp as
  supplied (no timezone conversion). ``day_of_week`` uses 0=Sunday .. 6=Saturday.
- Naive datetimes are treated as UTC.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Union

TimestampLike = Union[datetime, date, str]


def parse_timestamp(value: TimestampLike) -> datetime:
    """Return a datetime for a datetime, date or ISO-8601 string.

    Date-only values resolve to midnight. A trailing ``Z`` is accepted.
    Malformed strings raise ValueError; callers own input validity.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def to_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime (naive is treated as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def utc_now() -> datetime:
    return datetime.now(UTC)


def calendar_days_between(start: TimestampLike, end: TimestampLike) -> int:
    """Return whole calendar days from start to end (negative if end is earlier)."""
    start_date = to_utc(parse_timestamp(start)).date()
    end_date = to_utc(parse_timestamp(end)).date()
    return (end_date - start_date).days


def hour_of_day(value: TimestampLike) -> int:
    """Return the wall-clock hour (0–23)."""
    return parse_timestamp(value).hour


def day_of_week(value: TimestampLike) -> int:
    """Return the weekday with 0=Sunday .. 6=Saturday."""
    return (parse_timestamp(value).weekday() + 1) % 7


def resolve_as_of(as_of: TimestampLike | None) -> datetime:
    """Return the reference "now" for a check; defaults to the current UTC time."""
    if as_of is None:
        return utc_now()
    return parse_timestamp(as_of)
