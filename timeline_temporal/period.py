"""Named periods with a fuzzy start and a fuzzy end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from timeline_temporal.config import DEFAULT_CONFIG, TemporalConfig
from timeline_temporal.date import TemporalDate
from timeline_temporal.date_range import TemporalRange, check_era_order
from timeline_temporal.errors import MalformedInput


@dataclass(frozen=True)
class TemporalPeriod:
    """A period whose start and end are each known only to within a range.

    ``lower`` is the range in which the period begins and ``upper`` the range
    in which it ends. For "the Bronze Age, starting 3300-3000 BCE and ending
    1200-1150 BCE", lower is 3300-3000 BCE and upper is 1200-1150 BCE.

    Example:
        >>> period = TemporalPeriod.from_strings(
        ...     "Great War", "1914-07-28,1914-08-04", "1918-11-11,1919-06-28")
        >>> str(period)
        'Great War (1914-07-28,1914-08-04-1918-11-11,1919-06-28)'
    """
    name: str
    lower: TemporalRange
    upper: TemporalRange

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise MalformedInput("Period name must be a non-empty string")
        check_era_order(self.lower.lower, self.upper.upper)

    @classmethod
    def from_strings(
        cls,
        name: str,
        lower: str,
        upper: str,
        config: TemporalConfig | None = None,
    ) -> TemporalPeriod:
        """Build a period from two range strings of the form ``<date>,<date>``."""
        from timeline_temporal.parsing import TemporalParserFactory, TemporalParsers

        parser = TemporalParserFactory.get_parser(TemporalParsers.DATE_RANGE, config or DEFAULT_CONFIG)
        return cls(name=name, lower=parser.parse(lower), upper=parser.parse(upper))

    def inner_range(self) -> tuple[TemporalDate, TemporalDate]:
        """Latest possible start and earliest possible end.

        Dates between the two are certainly inside the period. The pair is
        inverted when the fuzzy start and end overlap.
        """
        return self.lower.upper, self.upper.lower

    def outer_range(self) -> tuple[TemporalDate, TemporalDate]:
        """Earliest possible start and latest possible end."""
        return self.lower.lower, self.upper.upper

    def inner_range_ints(self) -> tuple[int, int]:
        start, end = self.inner_range()
        return start.as_int(), end.as_int()

    def outer_range_ints(self) -> tuple[int, int]:
        start, end = self.outer_range()
        return start.as_int(), end.as_int()

    def __str__(self) -> str:
        return f"{self.name} ({self.lower}-{self.upper})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "lower": self.lower.to_dict(),
            "upper": self.upper.to_dict(),
            "text": str(self),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, enforce_order: bool = True) -> TemporalPeriod:
        from timeline_temporal.serialization import require_valid_payload

        require_valid_payload(data, "period")
        period = cls(
            name=data["name"],
            lower=TemporalRange.from_dict(data["lower"], enforce_order=enforce_order),
            upper=TemporalRange.from_dict(data["upper"], enforce_order=enforce_order),
        )
        if str(period) != data["text"]:
            raise MalformedInput(f"Text {data['text']!r} does not match period {period}")
        return period
