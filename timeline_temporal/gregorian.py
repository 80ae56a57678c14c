"""Proleptic Gregorian calendar validity checks.

Python's ``datetime`` stops at year 9999 and has no year 0, so the rules are
applied directly. Years are astronomical magnitudes: year 0 exists and is a
leap year.
"""

from __future__ import annotations

from timeline_temporal.codec import MAX_YEAR
from timeline_temporal.errors import InvalidCalendarDate

MONTHS_IN_YEAR = 12

# Days in each month of a common year, 1-indexed.
DAYS_IN_MONTH: tuple[int, ...] = (
    0,
    31,  # January
    28,  # February
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``.

    Raises:
        InvalidCalendarDate: If ``month`` is outside 1-12.
    """
    if not 1 <= month <= MONTHS_IN_YEAR:
        raise InvalidCalendarDate(f"Month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def validate_calendar_date(year: int, month: int, day: int, *, max_year: int = MAX_YEAR) -> None:
    """Raise if (year, month, day) is not a real proleptic Gregorian date.

    Args:
        year: Year magnitude; the era is irrelevant to validity
        month: Month, 1-12
        day: Day of month
        max_year: Largest year accepted

    Raises:
        InvalidCalendarDate: If any field is out of range.
    """
    if not 0 <= year <= max_year:
        raise InvalidCalendarDate(f"Year must be between 0 and {max_year}, got {year}")

    last_day = days_in_month(year, month)
    if not 1 <= day <= last_day:
        raise InvalidCalendarDate(
            f"Day must be between 1 and {last_day} for {year:04d}-{month:02d}, got {day}"
        )


def is_valid_calendar_date(year: int, month: int, day: int) -> bool:
    try:
        validate_calendar_date(year, month, day)
    except InvalidCalendarDate:
        return False
    return True
