"""Unit tests for proleptic Gregorian validity checks."""

import pytest

from timeline_temporal.errors import InvalidCalendarDate
from timeline_temporal.gregorian import (
    days_in_month,
    is_leap_year,
    is_valid_calendar_date,
    validate_calendar_date,
)


@pytest.mark.parametrize("year, expected", [
    (0, True),
    (4, True),
    (100, False),
    (400, True),
    (1900, False),
    (2000, True),
    (2023, False),
    (2024, True),
])
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize("year, month, expected", [
    (2023, 1, 31),
    (2023, 2, 28),
    (2024, 2, 29),
    (1900, 2, 28),
    (2023, 4, 30),
    (2023, 12, 31),
])
def test_days_in_month(year, month, expected):
    assert days_in_month(year, month) == expected


@pytest.mark.parametrize("month", [0, 13])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(InvalidCalendarDate):
        days_in_month(2000, month)


@pytest.mark.parametrize("year, month, day", [
    (2001, 2, 29),
    (1900, 2, 29),
    (2023, 4, 31),
    (2023, 1, 0),
    (2023, 13, 1),
    (65536, 1, 1),
])
def test_validate_calendar_date_rejects(year, month, day):
    with pytest.raises(InvalidCalendarDate):
        validate_calendar_date(year, month, day)
    assert is_valid_calendar_date(year, month, day) is False


def test_validate_calendar_date_accepts_year_beyond_datetime():
    validate_calendar_date(12000, 2, 29)
    validate_calendar_date(0, 2, 29)


def test_validate_calendar_date_respects_max_year():
    with pytest.raises(InvalidCalendarDate):
        validate_calendar_date(3000, 1, 1, max_year=2999)
