"""SearchFields: typed field values for search documents.

Fields hold string, number, geo point and timestamp values and convert to and
from the search service's wire JSON document format::

    fields = FieldSet()
    fields["tags"] = ["a", "b", "c"]
    raw = encode(fields)
    assert decode(raw)["tags"].value == "a"
"""

from __future__ import annotations

from SearchFields.config import CodecConfig
from SearchFields.core.classify import SupportsRFC3339, classify, from_native_values
from SearchFields.core.fields import FieldSet
from SearchFields.core.rules import check_value_counts, find_value_count_violations
from SearchFields.core.values import (
    FieldValues,
    GeoValue,
    NumberValue,
    StringValue,
    TimestampValue,
    Value,
    ValueType,
)
from SearchFields.errors import FieldsError, ParseError, ValidationError
from SearchFields.wire import decode, encode

__all__ = [
    "CodecConfig",
    "FieldSet",
    "FieldValues",
    "FieldsError",
    "GeoValue",
    "NumberValue",
    "ParseError",
    "StringValue",
    "SupportsRFC3339",
    "TimestampValue",
    "ValidationError",
    "Value",
    "ValueType",
    "check_value_counts",
    "classify",
    "decode",
    "encode",
    "find_value_count_violations",
    "from_native_values",
]
