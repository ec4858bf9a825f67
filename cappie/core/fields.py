"""
Structured field values

Fields are plain JSON-compatible Python values: str, int, float, bool,
None, list and dict. Base fields are bound when a logger is configured;
call fields are collected per log call with a FieldBuilder.
"""

import json
from typing import Any, Dict, Mapping, Optional

FieldValue = Any
Fields = Dict[str, FieldValue]


def to_field_value(value: Any) -> FieldValue:
    """
    Normalize a caller value into a field value.

    Tuples become lists and mapping keys become strings, recursively.
    Scalars and unknown objects are returned unchanged.
    """
    if isinstance(value, (list, tuple)):
        return [to_field_value(item) for item in value]
    if isinstance(value, Mapping):
        return {str(k): to_field_value(v) for k, v in value.items()}
    return value


def to_json(value: Any, ensure_ascii: bool = False) -> str:
    """Compact JSON serialization (raises TypeError/ValueError on failure)."""
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=ensure_ascii,
        allow_nan=False,
    )


def format_value(value: FieldValue) -> str:
    """
    Render a field value as plain text for ``key=value`` output.

    Nested lists and dicts are serialized as compact JSON; if that
    fails the value renders as an empty string.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple, dict)):
        try:
            return to_json(value)
        except (TypeError, ValueError):
            return ""
    return str(value)


def format_fields(fields: Mapping[str, FieldValue]) -> Optional[str]:
    """
    Render fields as space-joined ``key=value`` pairs.

    Returns:
        The rendered pairs, or None when there are no fields
    """
    if not fields:
        return None
    return " ".join(f"{key}={format_value(value)}" for key, value in fields.items())


def merge_fields(
    base: Mapping[str, FieldValue],
    call: Optional[Mapping[str, FieldValue]] = None
) -> Fields:
    """
    Overlay call fields onto a copy of the base fields.

    Call values win on key collision; neither input is modified.
    """
    merged = dict(base)
    if call:
        merged.update(call)
    return merged


class FieldBuilder:
    """
    Collects call fields for a single log call.

    Every method returns the builder so calls can be chained:

        logger.info_with("user created", lambda log: (
            log.string("user", "alice").number("id", 42)))
    """

    def __init__(self):
        self._fields: Fields = {}

    def field(self, key: str, value: Any) -> "FieldBuilder":
        """Add any JSON-compatible value."""
        self._fields[str(key)] = to_field_value(value)
        return self

    def string(self, key: str, value: Any) -> "FieldBuilder":
        """Add a string value."""
        self._fields[str(key)] = str(value)
        return self

    def number(self, key: str, value: Any) -> "FieldBuilder":
        """
        Add a numeric value.

        Raises:
            TypeError: If value is not an int or float
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"number field {key!r} must be int or float")
        self._fields[str(key)] = value
        return self

    def bool(self, key: str, value: Any) -> "FieldBuilder":
        """Add a boolean value."""
        self._fields[str(key)] = bool(value)
        return self

    def fields(self, mapping: Mapping[str, Any]) -> "FieldBuilder":
        """Add every entry of a mapping."""
        for key, value in mapping.items():
            self.field(key, value)
        return self

    def build(self) -> Fields:
        """Return a copy of the collected fields."""
        return dict(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldBuilder({self._fields!r})"
