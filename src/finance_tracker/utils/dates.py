"""Calendar arithmetic helpers."""

import calendar
from datetime import date, datetime


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Add months to a date, clamping the day to the target month end.

    Args:
        value: Date to shift.
        months: Number of months to add.

    Returns:
        date: Shifted date; 2024-01-31 plus one month is 2024-02-29.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, days_in_month(year, month))
    return value.replace(year=year, month=month, day=day)


def clamp_day(value: date, day: int) -> date:
    """Move a date to ``day`` within its month, clamped to the month end."""
    return value.replace(day=min(day, days_in_month(value.year, value.month)))


def coerce_date(value) -> date | None:
    """Normalize date values returned by database drivers.

    SQLite hands dates back as ISO strings while PostgreSQL returns
    ``date`` objects.

    Args:
        value: Raw value from a result row.

    Returns:
        date | None: Parsed date or None when the value is missing.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["days_in_month", "add_months", "clamp_day", "coerce_date"]
