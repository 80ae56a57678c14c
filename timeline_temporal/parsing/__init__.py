"""Text parsers for dates and date ranges.

Each parser is a strategy created through ``TemporalParserFactory``. Richer
expression parsers (circa, decades, centuries) plug in at the same
``String -> (CalendarDate, TemporalFlags)`` boundary as ``IsoDateParser``.
"""

from timeline_temporal.parsing.strategy import TemporalParserStrategy
from timeline_temporal.parsing.factory import TemporalParsers, TemporalParserFactory
from timeline_temporal.parsing.iso_date_parser import IsoDateParser
from timeline_temporal.parsing.date_range_parser import DateRangeParser

__all__ = [
    "DateRangeParser",
    "IsoDateParser",
    "TemporalParserFactory",
    "TemporalParserStrategy",
    "TemporalParsers",
]
