"""Parser for comma-separated date ranges."""

import logging

from timeline_temporal.date import TemporalDate
from timeline_temporal.date_range import TemporalRange
from timeline_temporal.errors import InvalidRangeSyntax, TemporalError
from timeline_temporal.flags import UPPER
from timeline_temporal.parsing.iso_date_parser import IsoDateParser
from timeline_temporal.parsing.strategy import TemporalParserStrategy

logger = logging.getLogger(__name__)


class DateRangeParser(TemporalParserStrategy):
    """Parses a pair of dates separated by a single comma.

    Each half follows the ``IsoDateParser`` grammar. The second half is
    stamped as the upper bound.

    Example: 1914-07-28,1918-11-11
    """

    def __init__(self, config=None):
        super().__init__(config)
        self._date_parser = IsoDateParser(self.config)

    def parse(self, text: str) -> TemporalRange:
        """Parse a date range.

        Args:
            text: The text to parse

        Returns:
            A TemporalRange

        Raises:
            InvalidRangeSyntax: If the text does not split into two dates.
            MalformedInput: If either half is not a valid date string.
            InvalidCalendarDate: If either half is not a real date.
            EraMismatch: If the lower bound is CE and the upper bound BCE.
            RangeOrderError: If order is enforced and lower is after upper.
        """
        if not isinstance(text, str):
            raise InvalidRangeSyntax(f"Expected a string, got {type(text).__name__}")

        dates = text.split(",")
        if len(dates) != 2:
            logger.debug(f"Rejected range string {text!r}: expected 2 dates, got {len(dates)}")
            raise InvalidRangeSyntax(f"Invalid range string: {text!r}")

        lower_text, upper_text = dates

        lower_date, lower_flags = self._date_parser.parse_with_flags(lower_text)
        upper_date, upper_flags = self._date_parser.parse_with_flags(upper_text)

        # A date cannot know it ends a range; the range builder says so.
        upper_flags.set_boolean(UPPER, True)

        lower = TemporalDate.from_flags(lower_date, lower_flags)
        upper = TemporalDate.from_flags(upper_date, upper_flags)

        try:
            return TemporalRange.from_dates(
                lower,
                upper,
                enforce_order=self.config.enforce_range_order,
            )
        except TemporalError as e:
            logger.debug(f"Rejected range string {text!r}: {e}")
            raise
