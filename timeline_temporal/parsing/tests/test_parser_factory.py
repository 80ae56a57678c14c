"""Tests for TemporalParserFactory and the package-level helpers."""

import pytest

import timeline_temporal
from timeline_temporal.config import TemporalConfig
from timeline_temporal.errors import InvalidRangeSyntax, TemporalError, UnknownFlag
from timeline_temporal.parsing import (
    DateRangeParser,
    IsoDateParser,
    TemporalParserFactory,
    TemporalParsers,
)


@pytest.mark.parametrize("strategy, expected_type", [
    (TemporalParsers.ISO_DATE, IsoDateParser),
    (TemporalParsers.DATE_RANGE, DateRangeParser),
])
def test_get_parser(strategy, expected_type):
    assert isinstance(TemporalParserFactory.get_parser(strategy), expected_type)


def test_get_parser_passes_config():
    config = TemporalConfig(enforce_range_order=False)
    parser = TemporalParserFactory.get_parser(TemporalParsers.DATE_RANGE, config)
    assert parser.config is config


def test_get_parser_unknown_strategy():
    with pytest.raises(ValueError):
        TemporalParserFactory.get_parser("CIRCA")


def test_parse_date_helper():
    date = timeline_temporal.parse_date("500-01-01 BCE")
    assert timeline_temporal.format_date(date) == "0500-01-01 BCE"


def test_parse_range_helper():
    assert str(timeline_temporal.parse_range("1914-07-28,1918-11-11")) == "1914-07-28,1918-11-11"


def test_parse_range_bogus():
    with pytest.raises(InvalidRangeSyntax):
        timeline_temporal.parse_range("bogus")


def test_errors_share_a_base():
    with pytest.raises(TemporalError):
        timeline_temporal.parse_date("bogus")
    with pytest.raises(ValueError):
        timeline_temporal.default_flags().get_boolean("circa")
    assert issubclass(UnknownFlag, TemporalError)
