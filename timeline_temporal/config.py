"""Configuration for temporal parsing."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from timeline_temporal.codec import MAX_ENCODABLE_YEAR

logger = logging.getLogger(__name__)

_DEFAULT_ENFORCE_RANGE_ORDER = True
_DEFAULT_MAX_YEAR = MAX_ENCODABLE_YEAR


@dataclass(frozen=True)
class TemporalConfig:
    enforce_range_order: bool = _DEFAULT_ENFORCE_RANGE_ORDER
    max_year: int = _DEFAULT_MAX_YEAR

    def __post_init__(self) -> None:
        if not 0 <= self.max_year <= MAX_ENCODABLE_YEAR:
            raise ValueError(f"max_year must be between 0 and {MAX_ENCODABLE_YEAR}, got {self.max_year}")


DEFAULT_CONFIG = TemporalConfig()


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer value {value!r}, using {default}")
        return default


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    logger.warning(f"Ignoring non-boolean value {value!r}, using {default}")
    return default


def load_temporal_config(environ: Mapping[str, str] | None = None) -> TemporalConfig:
    """Load parser configuration from a mapping of settings.

    Only reads ``os.environ`` when no mapping is given.

    Recognised keys:
        TIMELINE_TEMPORAL_ENFORCE_RANGE_ORDER: reject ranges whose lower bound
            is after the upper bound (default true)
        TIMELINE_TEMPORAL_MAX_YEAR: largest year the parser accepts
            (default and ceiling 32767, the largest encodable year)
    """
    if environ is None:
        environ = os.environ

    return TemporalConfig(
        enforce_range_order=_parse_bool(
            environ.get("TIMELINE_TEMPORAL_ENFORCE_RANGE_ORDER"),
            _DEFAULT_ENFORCE_RANGE_ORDER,
        ),
        max_year=_parse_int(environ.get("TIMELINE_TEMPORAL_MAX_YEAR"), _DEFAULT_MAX_YEAR),
    )
