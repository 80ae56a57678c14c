"""JSON schema validation for serialized dates, ranges and periods."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from timeline_temporal.errors import MalformedInput

SCHEMA_PATH = Path(__file__).parent / "schemas" / "temporal_payload.json"

PAYLOAD_KINDS = ("date", "range", "period")


@lru_cache(maxsize=1)
def _load_payload_schema() -> Dict:
    """Load the payload schema JSON."""
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def _schema_for(kind: str) -> Dict:
    if kind not in PAYLOAD_KINDS:
        raise ValueError(f"Unknown payload kind: {kind!r}")
    schema = dict(_load_payload_schema())
    schema["$ref"] = f"#/$defs/{kind}"
    return schema


def validate_temporal_payload(data: Any, kind: str) -> Tuple[bool, Optional[List[str]]]:
    """
    Validate a serialized payload against the temporal payload schema.

    Args:
        data: Payload produced by ``to_dict`` (or loaded from JSON)
        kind: One of "date", "range", "period"

    Returns:
        Tuple of (is_valid, errors)
    """
    schema = _schema_for(kind)
    try:
        jsonschema.validate(instance=data, schema=schema)
        return (True, None)
    except jsonschema.ValidationError as e:
        return (False, [e.message])
    except jsonschema.SchemaError as e:
        return (False, [f"Invalid schema: {e.message}"])


def require_valid_payload(data: Any, kind: str) -> None:
    """Raise MalformedInput unless ``data`` is a valid ``kind`` payload."""
    is_valid, errors = validate_temporal_payload(data, kind)
    if not is_valid:
        raise MalformedInput(f"Invalid {kind} payload: {'; '.join(errors or [])}")


def dumps(value: Any) -> str:
    """Serialize a date, range or period to a JSON string."""
    return json.dumps(value.to_dict(), sort_keys=True)


def loads(text: str, kind: str) -> Any:
    """Deserialize a JSON string produced by ``dumps``.

    Raises:
        MalformedInput: If the text is not JSON or not a valid payload.
    """
    from timeline_temporal.date import TemporalDate
    from timeline_temporal.date_range import TemporalRange
    from timeline_temporal.period import TemporalPeriod

    builders = {
        "date": TemporalDate.from_dict,
        "range": TemporalRange.from_dict,
        "period": TemporalPeriod.from_dict,
    }
    if kind not in builders:
        raise ValueError(f"Unknown payload kind: {kind!r}")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e
    return builders[kind](data)
