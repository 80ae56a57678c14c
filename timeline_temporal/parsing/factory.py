"""Factory for creating temporal parser strategies."""

from enum import Enum, auto

from timeline_temporal.config import TemporalConfig
from timeline_temporal.parsing.strategy import TemporalParserStrategy


class TemporalParsers(Enum):
    """Enumeration of available temporal parsing strategies."""
    ISO_DATE = auto()
    DATE_RANGE = auto()


class TemporalParserFactory:
    """Factory for creating TemporalParserStrategy instances."""

    @staticmethod
    def get_parser(strategy: TemporalParsers, config: TemporalConfig | None = None) -> TemporalParserStrategy:
        """Get a parser instance for the specified strategy.

        Args:
            strategy: The type of parser to create
            config: Parser configuration, defaults to DEFAULT_CONFIG

        Returns:
            An instance of the requested parser strategy

        Raises:
            ValueError: If the strategy is unknown
        """
        from timeline_temporal.parsing.iso_date_parser import IsoDateParser
        from timeline_temporal.parsing.date_range_parser import DateRangeParser

        if strategy == TemporalParsers.ISO_DATE:
            return IsoDateParser(config)
        elif strategy == TemporalParsers.DATE_RANGE:
            return DateRangeParser(config)
        else:
            raise ValueError(f"Unknown strategy: {strategy}")
