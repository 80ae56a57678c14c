"""An ordered pair of dates marking the lower and upper bound of a span."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from timeline_temporal.date import TemporalDate
from timeline_temporal.errors import EraMismatch, MalformedInput, RangeOrderError

logger = logging.getLogger(__name__)


def check_era_order(lower: TemporalDate, upper: TemporalDate) -> None:
    """Reject a CE lower bound paired with a BCE upper bound."""
    if upper.is_bce() and not lower.is_bce():
        raise EraMismatch(f"BCE/CE mismatch: {lower} cannot precede {upper}")


def check_chronological_order(lower: TemporalDate, upper: TemporalDate) -> None:
    """Reject a lower bound that falls after the upper bound."""
    if lower.sort_key() > upper.sort_key():
        raise RangeOrderError(f"Upper date {upper} precedes lower date {lower}")


@dataclass(frozen=True)
class TemporalRange:
    """Immutable (lower, upper) pair of dates.

    The lower date never carries the upper flag and the upper date always
    does. Use ``from_dates`` to stamp those flags on plain dates.
    """
    lower: TemporalDate
    upper: TemporalDate

    def __post_init__(self) -> None:
        if self.lower.is_upper():
            raise MalformedInput(f"Lower bound {self.lower} is flagged as an upper bound")
        if not self.upper.is_upper():
            raise MalformedInput(f"Upper bound {self.upper} is not flagged as an upper bound")
        check_era_order(self.lower, self.upper)

    @classmethod
    def from_dates(
        cls,
        lower: TemporalDate,
        upper: TemporalDate,
        *,
        enforce_order: bool = True,
    ) -> TemporalRange:
        """Build a range, stamping the upper flag on the second date.

        Args:
            lower: Earliest date of the range
            upper: Latest date of the range
            enforce_order: Reject ranges whose lower bound is after the upper

        Raises:
            EraMismatch: If ``lower`` is CE and ``upper`` is BCE.
            RangeOrderError: If ``enforce_order`` and lower is after upper.
        """
        lower = lower.with_upper(False)
        upper = upper.with_upper(True)

        check_era_order(lower, upper)
        if enforce_order:
            check_chronological_order(lower, upper)

        return cls(lower=lower, upper=upper)

    @classmethod
    def from_ints(cls, lower: int, upper: int, *, enforce_order: bool = True) -> TemporalRange:
        return cls.from_dates(
            TemporalDate.from_int(lower),
            TemporalDate.from_int(upper),
            enforce_order=enforce_order,
        )

    def as_ints(self) -> tuple[int, int]:
        return self.lower.as_int(), self.upper.as_int()

    def contains(self, date: TemporalDate) -> bool:
        """True if ``date`` falls between the bounds, inclusive."""
        return self.lower.sort_key() <= date.sort_key() <= self.upper.sort_key()

    def __str__(self) -> str:
        return f"{self.lower},{self.upper}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "lower": self.lower.to_dict(),
            "upper": self.upper.to_dict(),
            "text": str(self),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, enforce_order: bool = True) -> TemporalRange:
        """Rebuild a range from ``to_dict`` output.

        Raises:
            MalformedInput: If the payload is invalid or inconsistent.
            EraMismatch: If the bounds are era-inverted.
            RangeOrderError: If ``enforce_order`` and the bounds are inverted.
        """
        from timeline_temporal.serialization import require_valid_payload

        require_valid_payload(data, "range")
        date_range = cls.from_dates(
            TemporalDate.from_dict(data["lower"]),
            TemporalDate.from_dict(data["upper"]),
            enforce_order=enforce_order,
        )
        if str(date_range) != data["text"]:
            logger.debug(f"Range text {data['text']!r} disagrees with bounds {date_range}")
            raise MalformedInput(f"Text {data['text']!r} does not match range {date_range}")
        return date_range
