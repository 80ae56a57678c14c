"""A single calendrical point with its era and range-role flags."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, NamedTuple

from timeline_temporal import codec
from timeline_temporal.errors import InvalidCalendarDate, MalformedInput
from timeline_temporal.flags import BCE, UPPER, TemporalFlags
from timeline_temporal.gregorian import MONTHS_IN_YEAR, is_valid_calendar_date


class CalendarDate(NamedTuple):
    """Year, month and day as read from text, before flags are attached."""
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class TemporalDate:
    """Immutable date with ``bce`` and ``upper`` flags.

    Fields are checked against their encoded widths on construction
    (year 0-65535, month 1-12, day 1-31, or the all-zero empty sentinel).
    Calendar validity such as February 30th is checked by the text parser,
    not here; see ``is_calendar_valid``.

    ``upper`` marks the date as the upper bound of a range. It is stamped by
    whoever builds the range and defaults to False.
    """
    year: int
    month: int
    day: int
    bce: bool = False
    upper: bool = False

    def __post_init__(self) -> None:
        is_valid, error_message = self.validate()
        if not is_valid:
            raise InvalidCalendarDate(f"Invalid TemporalDate: {error_message}")

    def validate(self) -> tuple[bool, str]:
        """Check field types and widths.

        Returns:
            Tuple of (is_valid, error_message). error_message is empty if valid.
        """
        for field_name in ["year", "month", "day"]:
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                return False, f"Field '{field_name}' must be int, got {type(value).__name__}"

        for field_name in ["bce", "upper"]:
            value = getattr(self, field_name)
            if not isinstance(value, bool):
                return False, f"Field '{field_name}' must be bool, got {type(value).__name__}"

        if not 0 <= self.year <= codec.MAX_YEAR:
            return False, f"Field 'year' must be between 0 and {codec.MAX_YEAR}, got {self.year}"

        if self.year == 0 and self.month == 0 and self.day == 0:
            if self.bce:
                return False, "The empty date 0000-00-00 cannot be BCE"
            return True, ""

        if not 1 <= self.month <= MONTHS_IN_YEAR:
            return False, f"Field 'month' must be between 1 and 12, got {self.month}"

        if not 1 <= self.day <= 31:
            return False, f"Field 'day' must be between 1 and 31, got {self.day}"

        return True, ""

    @classmethod
    def empty(cls) -> TemporalDate:
        return cls(year=0, month=0, day=0)

    @classmethod
    def from_int(cls, word: int) -> TemporalDate:
        """Decode an encoded word into a date.

        Raises:
            InvalidCalendarDate: If the decoded month or day is outside its
                legal range.
        """
        decoded = codec.decode(word)
        return cls(
            year=decoded.year,
            month=decoded.month,
            day=decoded.day,
            bce=decoded.bce,
            upper=decoded.upper,
        )

    @classmethod
    def from_flags(cls, calendar_date: CalendarDate, flags: TemporalFlags) -> TemporalDate:
        """Build a date from parsed fields and the flags a parser attached.

        The flags are frozen: once the date exists they can no longer change.
        """
        flags.freeze()
        return cls(
            year=calendar_date.year,
            month=calendar_date.month,
            day=calendar_date.day,
            bce=flags.get_boolean(BCE),
            upper=flags.get_boolean(UPPER),
        )

    @property
    def flags(self) -> TemporalFlags:
        """A frozen snapshot of this date's flags."""
        return TemporalFlags({BCE: self.bce, UPPER: self.upper}).freeze()

    def is_bce(self) -> bool:
        return self.bce

    def is_upper(self) -> bool:
        return self.upper

    def is_empty(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def is_calendar_valid(self) -> bool:
        return is_valid_calendar_date(self.year, self.month, self.day)

    def with_upper(self, upper: bool) -> TemporalDate:
        if self.upper == upper:
            return self
        return replace(self, upper=upper)

    def as_int(self) -> int:
        """Encode this date as a signed 32-bit integer.

        Raises:
            EncodingOverflow: If the year is above 32767.
        """
        return codec.encode_checked(self.year, self.month, self.day, self.bce, self.upper)

    def sort_key(self) -> tuple[int, int, int]:
        """Chronological ordering key. BCE years count backwards from zero."""
        year = -self.year if self.bce else self.year
        return (year, self.month, self.day)

    def __str__(self) -> str:
        s = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if self.bce:
            s = f"{s} BCE"
        return s

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "bce": self.bce,
            "upper": self.upper,
            "encoded": self.as_int(),
            "text": str(self),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TemporalDate:
        """Rebuild a date from ``to_dict`` output.

        The encoded integer is authoritative; the other fields must agree
        with it.

        Raises:
            MalformedInput: If the payload fails schema validation or its
                fields disagree with the encoded value.
        """
        from timeline_temporal.serialization import require_valid_payload

        require_valid_payload(data, "date")
        date = cls.from_int(data["encoded"])
        _check_date_fields(date, data)
        return date


def _check_date_fields(date: TemporalDate, data: dict[str, Any]) -> None:
    for field_name in ["year", "month", "day", "bce", "upper"]:
        if getattr(date, field_name) != data[field_name]:
            raise MalformedInput(
                f"Field '{field_name}' is {data[field_name]!r} but encoded value "
                f"{data['encoded']} decodes to {getattr(date, field_name)!r}"
            )
    if str(date) != data["text"]:
        raise MalformedInput(f"Text {data['text']!r} does not match encoded date {date}")
