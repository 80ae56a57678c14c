"""Named boolean flags attached to a date while it is being built.

Parsers set attributes by name (``bce``, ``upper``) rather than by position.
The key set is closed: reading or writing any other key fails, and a key
that is known but false is distinct from a key that does not exist.
"""

from __future__ import annotations

from typing import Iterator, Mapping

from timeline_temporal.errors import FlagsFrozen, UnknownFlag

BCE = "bce"
UPPER = "upper"

KNOWN_FLAGS: tuple[str, ...] = (BCE, UPPER)


class TemporalFlags:
    """Closed set of boolean flags.

    Not thread-safe. Mutation is expected only while the owning date is being
    constructed; ``freeze`` is called when the date is published.
    """

    def __init__(self, booleans: Mapping[str, bool]):
        self._booleans = {key: bool(value) for key, value in booleans.items()}
        self._frozen = False

    def get_boolean(self, key: str) -> bool:
        """Return the value for ``key``.

        Raises:
            UnknownFlag: If ``key`` is not in the closed set.
        """
        if key not in self._booleans:
            raise UnknownFlag(key)
        return self._booleans[key]

    def set_boolean(self, key: str, value: bool) -> bool:
        """Set ``key`` and return its previous value.

        Raises:
            UnknownFlag: If ``key`` is not in the closed set.
            FlagsFrozen: If the flags were already frozen.
        """
        if key not in self._booleans:
            raise UnknownFlag(key)
        if self._frozen:
            raise FlagsFrozen(f"Cannot set {key!r}: flags are frozen")
        previous = self._booleans[key]
        self._booleans[key] = bool(value)
        return previous

    def freeze(self) -> TemporalFlags:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> TemporalFlags:
        """Return an unfrozen copy with the same keys and values."""
        return TemporalFlags(self._booleans)

    def as_dict(self) -> dict[str, bool]:
        return dict(self._booleans)

    def __contains__(self, key: object) -> bool:
        return key in self._booleans

    def __iter__(self) -> Iterator[str]:
        return iter(self._booleans)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemporalFlags):
            return NotImplemented
        return self._booleans == other._booleans

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"TemporalFlags({self._booleans!r}{state})"


def default_flags() -> TemporalFlags:
    """Build flags with the default closed set, every value false."""
    return TemporalFlags({key: False for key in KNOWN_FLAGS})
