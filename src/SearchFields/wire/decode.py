"""Wire document parser.

A wire document maps field names to ``{"values": [record, ...]}``. Each record
is a tagged union keyed by ``stringValue``, ``timestampValue``, ``geoValue`` or
``numberValue``; the first key present (and not null) in that order decides
the kind. Records with none of these keys are dropped.
"""

from __future__ import annotations

from typing import Any, Mapping

from SearchFields.config.codec import CodecConfig
from SearchFields.core.fields import FieldSet
from SearchFields.core.values import (
    STRING_TYPES,
    GeoValue,
    NumberValue,
    StringValue,
    TimestampValue,
    Value,
    ValueType,
)
from SearchFields.errors import ValidationError
from SearchFields.utils.log import log


def decode(raw: Mapping[str, Any], *, config: CodecConfig | None = None) -> FieldSet:
    """Parse a wire document into a field set.

    Fields whose ``values`` array is missing, empty, or holds only dropped
    records are kept with no values.

    Args:
        raw: Wire document mapping.
        config: Codec configuration attached to the resulting field set.

    Returns:
        Decoded field set, in document order.

    Raises:
        ValidationError: If the document or a field record has the wrong
            shape, or a geo/number payload is malformed.
        ParseError: If a timestamp is not valid RFC 3339.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("Wire document must be an object")

    fields = FieldSet(config=config)
    for name, raw_field in raw.items():
        fields.set_values(name, decode_values(raw_field, name=name))
    return fields


def decode_values(raw_field: Any, *, name: str = "") -> list[Value]:
    """Parse one field record into its values, in array order."""
    if not isinstance(raw_field, Mapping):
        raise ValidationError(f"Field {name!r} must be an object")

    records = raw_field.get("values")
    if records is None:
        log.debug("Field %r has no values array", name)
        return []
    if not isinstance(records, list):
        raise ValidationError(f"Field {name!r} values must be a list")

    values: list[Value] = []
    for idx, record in enumerate(records):
        value = decode_value(record)
        if value is None:
            log.debug("Dropped unrecognized value %s[%d]: %r", name, idx, record)
            continue
        values.append(value)
    return values


def decode_value(record: Any) -> Value | None:
    """Parse one value record; returns None for unrecognized records."""
    if not isinstance(record, Mapping):
        return None
    if record.get("stringValue") is not None:
        return _decode_string(record)
    if record.get("timestampValue") is not None:
        return TimestampValue.parse(record["timestampValue"])
    if record.get("geoValue") is not None:
        return _decode_geo(record["geoValue"])
    if record.get("numberValue") is not None:
        return NumberValue(_coerce_number(record["numberValue"]))
    return None


def _decode_string(record: Mapping[str, Any]) -> StringValue | None:
    string_format = record.get("stringFormat") or ValueType.DEFAULT.value
    subtype = str(string_format).lower()
    if subtype not in {kind.value for kind in STRING_TYPES}:
        log.warning("Dropped string value with unknown stringFormat %r", string_format)
        return None
    text = record["stringValue"]
    if not isinstance(text, str):
        raise ValidationError(f"Invalid stringValue: {text!r}")
    lang = record.get("lang")
    if lang is not None and not isinstance(lang, str):
        raise ValidationError(f"Invalid lang: {lang!r}")
    return StringValue(text, ValueType(subtype), lang)


def _decode_geo(payload: Any) -> GeoValue:
    if isinstance(payload, Mapping):
        return GeoValue.from_pair(payload)
    return GeoValue.parse(payload)


def _coerce_number(payload: Any) -> int | float:
    if isinstance(payload, bool):
        raise ValidationError(f"Invalid numberValue: {payload!r}")
    if isinstance(payload, (int, float)):
        return payload
    text = str(payload).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as e:
        raise ValidationError(f"Invalid numberValue: {payload!r}") from e
