"""Conversion between field sets and the wire JSON document format."""

from __future__ import annotations

from SearchFields.wire.decode import decode, decode_value, decode_values
from SearchFields.wire.encode import WireDocument, encode, encode_value, encode_values

__all__ = [
    "WireDocument",
    "decode",
    "decode_value",
    "decode_values",
    "encode",
    "encode_value",
    "encode_values",
]
