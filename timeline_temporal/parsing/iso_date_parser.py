"""Parser for ISO-8601 dates with an optional era marker."""

import logging
import re

from timeline_temporal.date import CalendarDate, TemporalDate
from timeline_temporal.errors import InvalidCalendarDate, MalformedInput
from timeline_temporal.flags import BCE, TemporalFlags, default_flags
from timeline_temporal.gregorian import validate_calendar_date
from timeline_temporal.parsing.strategy import TemporalParserStrategy

logger = logging.getLogger(__name__)


class IsoDateParser(TemporalParserStrategy):
    """Parses ``YYYY-MM-DD`` dates with an optional ``BCE`` or ``CE`` suffix.

    The year takes one to nine digits, month and day one or two. A single
    space may separate the date from the era, which is case-insensitive.

    Example: 500-01-01 BCE
    """

    _DATE_RE = re.compile(
        r"(?P<year>[0-9]{1,9})-(?P<month>[0-9]{1,2})-(?P<day>[0-9]{1,2})(?: ?(?P<era>BCE|CE))?",
        flags=re.IGNORECASE,
    )

    def parse_with_flags(self, text: str) -> tuple[CalendarDate, TemporalFlags]:
        """Parse text into calendar fields and unfrozen flags.

        Callers that need to stamp further flags (the range parser marks its
        upper bound) do so before building the date with
        ``TemporalDate.from_flags``.

        Raises:
            MalformedInput: If the text does not match the date grammar.
            InvalidCalendarDate: If the date does not exist in the proleptic
                Gregorian calendar or the year exceeds the configured maximum.
        """
        if not isinstance(text, str):
            raise MalformedInput(f"Expected a string, got {type(text).__name__}")

        m = self._DATE_RE.fullmatch(text)
        if not m:
            logger.debug(f"Rejected date string {text!r}: does not match YYYY-MM-DD [BCE|CE]")
            raise MalformedInput(f"Invalid date string: {text!r}")

        yyyy = int(m.group("year"))
        mm = int(m.group("month"))
        dd = int(m.group("day"))

        try:
            validate_calendar_date(yyyy, mm, dd, max_year=self.config.max_year)
        except InvalidCalendarDate as e:
            logger.debug(f"Rejected date string {text!r}: {e}")
            raise

        flags = default_flags()
        era = (m.group("era") or "").upper()
        if era == "BCE":
            flags.set_boolean(BCE, True)

        return CalendarDate(year=yyyy, month=mm, day=dd), flags

    def parse(self, text: str) -> TemporalDate:
        """Parse a single date.

        Args:
            text: The text to parse

        Returns:
            A TemporalDate with ``upper`` unset
        """
        calendar_date, flags = self.parse_with_flags(text)
        return TemporalDate.from_flags(calendar_date, flags)
