"""Wire document renderer.

Every value of a field, not only the representative, is written out. Values
whose type tag is not one of the known kinds are skipped.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from SearchFields.config.codec import CodecConfig
from SearchFields.core.fields import FieldSet
from SearchFields.core.values import GeoValue, NumberValue, StringValue, TimestampValue, Value, ValueType
from SearchFields.utils.log import log

WireDocument = dict[str, dict[str, list[dict[str, Any]]]]


def encode(fields: FieldSet, *, config: CodecConfig | None = None) -> WireDocument:
    """Render a field set as a wire document.

    Args:
        fields: Field set to render.
        config: Codec configuration; defaults to the field set's own.

    Returns:
        JSON-serializable wire document.
    """
    config = config or fields.config
    return {name: encode_values(fields.values_of(name), config=config) for name in fields}


def encode_values(values: Iterable[Value], *, config: CodecConfig | None = None) -> dict[str, list[dict[str, Any]]]:
    config = config or CodecConfig()
    raw_values: list[dict[str, Any]] = []
    for value in values:
        raw = encode_value(value, config=config)
        if raw is None:
            log.debug("Skipped value with unknown type %r", getattr(value, "type", None))
            continue
        raw_values.append(raw)
    return {"values": raw_values}


def encode_value(value: Value, *, config: CodecConfig | None = None) -> dict[str, Any] | None:
    """Render one value record; returns None for unknown type tags."""
    encoder = _ENCODERS.get(value.type)
    if encoder is None:
        return None
    return encoder(value, config or CodecConfig())


def _encode_string(value: StringValue, config: CodecConfig) -> dict[str, Any]:
    raw: dict[str, Any] = {"stringFormat": value.subtype.value.upper()}
    if value.lang is not None:
        raw["lang"] = value.lang
    raw["stringValue"] = value.value
    return raw


def _encode_geo(value: GeoValue, config: CodecConfig) -> dict[str, Any]:
    return {"geoValue": str(value)}


def _encode_number(value: NumberValue, config: CodecConfig) -> dict[str, Any]:
    return {"numberValue": value.wire_number()}


def _encode_timestamp(value: TimestampValue, config: CodecConfig) -> dict[str, Any]:
    return {"timestampValue": value.rfc3339(config.timestamp_fraction_digits)}


_ENCODERS: dict[ValueType, Callable[[Any, CodecConfig], dict[str, Any]]] = {
    ValueType.ATOM: _encode_string,
    ValueType.DEFAULT: _encode_string,
    ValueType.HTML: _encode_string,
    ValueType.TEXT: _encode_string,
    ValueType.GEO: _encode_geo,
    ValueType.NUMBER: _encode_number,
    ValueType.TIMESTAMP: _encode_timestamp,
}
