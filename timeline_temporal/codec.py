"""Bit-packed 32-bit encoding of historical dates.

Layout of the word, most significant bit first:

    bits 31-16  year magnitude (0-65535)
    bits 15-12  month (1-12, 0 only in the empty sentinel)
    bits 11-7   day (1-31)
    bit  6      upper flag, set on the upper bound of a range
    bits 5-0    reserved, always zero

BCE is not a field: the encoder negates the whole word and the decoder
treats any negative value as BCE. The all-zero word is the empty sentinel.

The raw setters and ``encode`` never fail. Values wider than their field are
truncated, so callers validate first or use ``encode_checked``.
"""

from __future__ import annotations

from typing import NamedTuple

from timeline_temporal.errors import EncodingOverflow

RESET_TIME = 0x00000000
RESET_YEAR = 0x0000FFFF
RESET_MONTH = 0xFFFF0FFF
RESET_DAY = 0xFFFFF07F
BCE_FLAG = 0x80000000
UPPER_FLAG = 0x00000040
GET_MONTH = 0x0000F000
GET_DAY = 0x00000F80

YEAR_MASK = 0xFFFF
MONTH_MASK = 0xF
DAY_MASK = 0x1F

YEAR_SHIFT = 16
MONTH_SHIFT = 12
DAY_SHIFT = 7

MAX_YEAR = YEAR_MASK
# Largest year whose encoding leaves bit 31 clear.
MAX_ENCODABLE_YEAR = 0x7FFF

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class DecodedTime(NamedTuple):
    """Fields unpacked from an encoded word."""
    year: int
    month: int
    day: int
    bce: bool
    upper: bool


def clear_time(word: int) -> int:
    return word & RESET_TIME


def set_year(word: int, year: int) -> int:
    return (word & RESET_YEAR) | ((year & YEAR_MASK) << YEAR_SHIFT)


def set_month(word: int, month: int) -> int:
    return (word & RESET_MONTH) | ((month & MONTH_MASK) << MONTH_SHIFT)


def set_day(word: int, day: int) -> int:
    return (word & RESET_DAY) | ((day & DAY_MASK) << DAY_SHIFT)


def encode(year: int, month: int, day: int, bce: bool = False, upper: bool = False) -> int:
    """Pack a date into a single integer, negated when ``bce`` is set."""
    word = clear_time(0)
    word = set_year(word, year)
    word = set_month(word, month)
    word = set_day(word, day)

    if upper:
        word |= UPPER_FLAG

    if bce:
        word = -word

    return word


def encode_checked(year: int, month: int, day: int, bce: bool = False, upper: bool = False) -> int:
    """Like ``encode`` but refuse fields that would be truncated or overflow.

    Raises:
        EncodingOverflow: If a field is negative or wider than its slot, or if
            the year would set bit 31 of the word.
    """
    if year < 0:
        raise EncodingOverflow(f"Year must be a non-negative magnitude, got {year}")
    if year > MAX_YEAR:
        raise EncodingOverflow(f"Year {year} does not fit a 16-bit field")
    if (year << YEAR_SHIFT) & BCE_FLAG:
        raise EncodingOverflow(
            f"Year {year} does not fit a signed 32-bit word (max {MAX_ENCODABLE_YEAR})"
        )
    if not 0 <= month <= MONTH_MASK:
        raise EncodingOverflow(f"Month {month} does not fit a 4-bit field")
    if not 0 <= day <= DAY_MASK:
        raise EncodingOverflow(f"Day {day} does not fit a 5-bit field")

    word = encode(year, month, day, bce, upper)
    if not fits_int32(word):
        raise EncodingOverflow(f"Encoded word {word} does not fit a signed 32-bit integer")
    return word


def decode(word: int) -> DecodedTime:
    """Unpack an encoded word. Never fails; out-of-calendar fields pass through."""
    bce = False

    if word < 0:
        bce = True
        word = -word

    upper = (word & UPPER_FLAG) != 0
    year = word >> YEAR_SHIFT
    month = (word & GET_MONTH) >> MONTH_SHIFT
    day = (word & GET_DAY) >> DAY_SHIFT

    return DecodedTime(year=year, month=month, day=day, bce=bce, upper=upper)


def fits_int32(word: int) -> bool:
    return INT32_MIN <= word <= INT32_MAX
