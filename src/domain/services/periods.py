"""Calendar helpers for monthly ledger windows."""

import calendar
from datetime import date, timedelta

from src.domain.constants import MONTH_ABBREVIATIONS


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).

    Returns:
        tuple[date, date]: Inclusive window covering the month.
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return the (year, month) that is ``delta`` months away.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        delta: Number of months to move, negative for the past.

    Returns:
        tuple[int, int]: Shifted year and month.
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_label(year: int, month: int) -> str:
    """Return a short display label such as ``out/26``."""
    return f"{MONTH_ABBREVIATIONS[month - 1]}/{year % 100:02d}"


def calendar_start(year: int, month: int) -> date:
    """Return the Sunday on or before the first day of the month."""
    first_day = date(year, month, 1)
    # date.weekday() is Monday=0; Sunday-first grids need Sunday=0.
    offset = (first_day.weekday() + 1) % 7
    return first_day - timedelta(days=offset)


def date_range(first_day: date, last_day: date) -> list[date]:
    """Every calendar day between two days, both ends included.

    An inverted pair yields an empty list.
    """
    span = (last_day - first_day).days
    return [first_day + timedelta(days=offset) for offset in range(span + 1)]


__all__ = [
    "month_bounds",
    "shift_month",
    "month_label",
    "calendar_start",
    "date_range",
]
