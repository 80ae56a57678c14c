"""
Timeline Temporal Primitives

Historical dates, date ranges and named periods for timeline cataloguing:
- Bit-packed 32-bit encoding of (year, month, day, era, boundary) tuples
- Closed named flag bag attached while dates are built
- Immutable TemporalDate, TemporalRange and TemporalPeriod values
- ISO-8601 date and comma-separated range parsing with BCE/CE eras
"""

from timeline_temporal.codec import decode, encode, encode_checked
from timeline_temporal.config import DEFAULT_CONFIG, TemporalConfig, load_temporal_config
from timeline_temporal.date import CalendarDate, TemporalDate
from timeline_temporal.date_range import TemporalRange
from timeline_temporal.errors import (
    EncodingOverflow,
    EraMismatch,
    FlagsFrozen,
    InvalidCalendarDate,
    InvalidRangeSyntax,
    MalformedInput,
    RangeOrderError,
    TemporalError,
    UnknownFlag,
)
from timeline_temporal.flags import TemporalFlags, default_flags
from timeline_temporal.parsing import TemporalParserFactory, TemporalParsers
from timeline_temporal.period import TemporalPeriod


def parse_date(text: str, config: TemporalConfig | None = None) -> TemporalDate:
    """Parse ``YYYY-MM-DD [BCE|CE]`` into a TemporalDate."""
    return TemporalParserFactory.get_parser(TemporalParsers.ISO_DATE, config).parse(text)


def parse_range(text: str, config: TemporalConfig | None = None) -> TemporalRange:
    """Parse ``<date>,<date>`` into a TemporalRange."""
    return TemporalParserFactory.get_parser(TemporalParsers.DATE_RANGE, config).parse(text)


def format_date(date: TemporalDate) -> str:
    return str(date)


__all__ = [
    "CalendarDate",
    "DEFAULT_CONFIG",
    "EncodingOverflow",
    "EraMismatch",
    "FlagsFrozen",
    "InvalidCalendarDate",
    "InvalidRangeSyntax",
    "MalformedInput",
    "RangeOrderError",
    "TemporalConfig",
    "TemporalDate",
    "TemporalError",
    "TemporalFlags",
    "TemporalPeriod",
    "TemporalRange",
    "UnknownFlag",
    "decode",
    "default_flags",
    "encode",
    "encode_checked",
    "format_date",
    "load_temporal_config",
    "parse_date",
    "parse_range",
]
