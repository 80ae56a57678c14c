"""Exception hierarchy for temporal parsing, validation and encoding."""


class TemporalError(ValueError):
    """Base class for every error raised by timeline_temporal."""


class MalformedInput(TemporalError):
    """Text (or a serialized payload) does not match the expected grammar."""


class InvalidRangeSyntax(TemporalError):
    """A range string does not split into exactly two dates."""


class InvalidCalendarDate(TemporalError):
    """Year, month and day do not form a real proleptic Gregorian date."""


class EraMismatch(TemporalError):
    """A range or period whose CE lower bound precedes a BCE upper bound."""


class RangeOrderError(TemporalError):
    """Lower bound falls after the upper bound within the same era."""


class UnknownFlag(TemporalError):
    """Read or write against a flag key outside the closed set."""

    def __init__(self, key: str):
        super().__init__(f"Unknown flag: {key!r}")
        self.key = key


class FlagsFrozen(TemporalError):
    """Mutation of a flag bag after its owning date was published."""


class EncodingOverflow(TemporalError):
    """Fields that cannot be packed into a signed 32-bit word."""
