"""Tests for DateRangeParser."""

import pytest

from timeline_temporal.config import TemporalConfig
from timeline_temporal.errors import (
    EraMismatch,
    InvalidCalendarDate,
    InvalidRangeSyntax,
    MalformedInput,
    RangeOrderError,
)
from timeline_temporal.parsing.date_range_parser import DateRangeParser


class TestDateRangeParser:
    """Test cases for comma-separated date ranges."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = DateRangeParser()

    def test_ce_range(self):
        date_range = self.parser.parse("1914-07-28,1918-11-11")
        assert str(date_range) == "1914-07-28,1918-11-11"
        assert str(date_range.lower) == "1914-07-28"
        assert str(date_range.upper) == "1918-11-11"

    def test_upper_flag_only_on_second_date(self):
        date_range = self.parser.parse("1914-07-28,1918-11-11")
        assert date_range.lower.is_upper() is False
        assert date_range.upper.is_upper() is True

    def test_each_half_parsed_from_its_own_text(self):
        date_range = self.parser.parse("490-09-12 BCE,479-08-27 BCE")
        assert str(date_range.lower) == "0490-09-12 BCE"
        assert str(date_range.upper) == "0479-08-27 BCE"

    @pytest.mark.parametrize("lower, upper", [
        ("0490-09-12 BCE", "0479-08-27 BCE"),
        ("0027-01-16 BCE", "0014-08-19"),
        ("1066-10-14", "1066-10-14"),
        ("1914-07-28", "1918-11-11"),
    ])
    def test_range_split_law(self, lower, upper):
        date_range = self.parser.parse(f"{lower},{upper}")
        assert str(date_range.lower) == lower
        assert str(date_range.upper) == upper
        assert date_range.upper.is_upper() is True
        assert date_range.lower.is_upper() is False

    def test_era_mismatch(self):
        with pytest.raises(EraMismatch):
            self.parser.parse("2000-01-01,100-01-01 BCE")

    @pytest.mark.parametrize("text", [
        "bogus",
        "1914-07-28",
        "1914-07-28,1918-11-11,1919-06-28",
        "",
    ])
    def test_invalid_range_syntax(self, text):
        with pytest.raises(InvalidRangeSyntax):
            self.parser.parse(text)

    @pytest.mark.parametrize("text", [
        "1914-07-28,bogus",
        "bogus,1918-11-11",
        "1914-07-28, 1918-11-11",
        "1914-07-28,",
    ])
    def test_malformed_half(self, text):
        with pytest.raises(MalformedInput):
            self.parser.parse(text)

    def test_invalid_calendar_half(self):
        with pytest.raises(InvalidCalendarDate):
            self.parser.parse("1914-07-28,1918-02-30")

    def test_order_enforced_by_default(self):
        with pytest.raises(RangeOrderError):
            self.parser.parse("1918-11-11,1914-07-28")
        with pytest.raises(RangeOrderError):
            self.parser.parse("479-08-27 BCE,490-09-12 BCE")

    def test_order_check_disabled_by_config(self):
        parser = DateRangeParser(TemporalConfig(enforce_range_order=False))
        date_range = parser.parse("1918-11-11,1914-07-28")
        assert str(date_range) == "1918-11-11,1914-07-28"

    def test_era_mismatch_not_disabled_by_config(self):
        parser = DateRangeParser(TemporalConfig(enforce_range_order=False))
        with pytest.raises(EraMismatch):
            parser.parse("2000-01-01,100-01-01 BCE")

    def test_encoded_bounds(self):
        lower, upper = self.parser.parse("1970-01-01,1970-01-01").as_ints()
        assert lower == 0x07B21080
        assert upper == 0x07B210C0
