"""Calendar date helpers.

All day counts use local calendar dates: the time of day is dropped before
subtracting, so two timestamps on the same date are 0 days apart.
"""

from __future__ import annotations

from datetime import date, datetime

from src.engine.errors import ValidationError


def parse_date(value: date | datetime | str, field: str = "date") -> date:
    """Convert an ISO string, datetime or date into a calendar date.

    Args:
        value: ISO-8601 string ("2024-02-16" or "2024-02-16T15:30:00"),
            datetime (aware values are converted to local time) or date.
        field: Input field name reported on failure.

    Returns:
        The calendar date.

    Raises:
        ValidationError: If the value is missing or not a parseable date.
    """
    if isinstance(value, datetime):
        return to_local_date(value)
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            return to_local_date(datetime.fromisoformat(text))
        except ValueError:
            raise ValidationError(field, f"'{value}' is not a valid ISO calendar date") from None
    if value is None:
        raise ValidationError(field, "is required")
    raise ValidationError(field, f"'{value}' is not a valid ISO calendar date")


def to_local_date(value: date | datetime) -> date:
    """Drop the time of day, converting aware datetimes to local time first."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Calendar days from start to end.

    Negative when end is before start.

    Example:
        >>> days_between(date(2024, 1, 15), date(2024, 2, 16))
        32
        >>> days_between(datetime(2024, 1, 15, 8), datetime(2024, 1, 15, 23))
        0
    """
    return (to_local_date(end) - to_local_date(start)).days
