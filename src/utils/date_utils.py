"""Calendar helpers."""

import calendar
from datetime import date


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of the month.

    Args:
        start: Date to shift.
        months: Number of months to add (may be negative).

    Returns:
        date: Shifted date.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def months_between(start: date, end: date) -> int:
    """Return the number of whole calendar months from start to end."""
    return (end.year - start.year) * 12 + (end.month - start.month)


__all__ = ["add_months", "months_between"]
