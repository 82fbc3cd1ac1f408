"""Native Python value classification.

Each native value is matched, in order, as a geo point, a timestamp, a number
and finally a string. Classification never fails on unknown input: anything
unrecognised becomes a ``StringValue`` of its ``str()``.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from numbers import Real
from typing import Any, Mapping, Protocol, runtime_checkable

from SearchFields.core.values import (
    FieldValues,
    GeoValue,
    NumberValue,
    StringValue,
    TimestampValue,
    Value,
)
from SearchFields.errors import ValidationError
from SearchFields.utils.log import log

_GEO_KEYS = ("latitude", "longitude")


@runtime_checkable
class SupportsRFC3339(Protocol):
    """Object that can render itself as an RFC 3339 timestamp string."""

    def rfc3339(self) -> str:
        raise NotImplementedError


def from_native_values(natives: Any, *, strict_geo: bool = False) -> list[Value]:
    """Classify one native value, or a list/tuple of them, in order.

    Args:
        natives: A single native value or a list/tuple of native values.
        strict_geo: Raise for mappings carrying only one of latitude/longitude.

    Returns:
        Unbound values in input order.
    """
    if not isinstance(natives, (list, tuple, FieldValues)):
        natives = [natives]
    return [classify(native, strict_geo=strict_geo) for native in natives]


def classify(native: Any, *, strict_geo: bool = False) -> Value:
    """Build the value a single native input maps to.

    Raises:
        ValidationError: In strict geo mode, for a partial geo mapping.
        ParseError: If an ``rfc3339()`` object returns an invalid timestamp.
    """
    if isinstance(native, Value):
        return native
    if _has_coordinates(native):
        return GeoValue.from_pair(native)
    if _has_partial_coordinates(native):
        if strict_geo:
            raise ValidationError(f"Geo value needs both latitude and longitude: {native!r}")
        log.warning("Geo-like value without both latitude and longitude stored as string: %r", native)
    if isinstance(native, (datetime, date)) or isinstance(native, SupportsRFC3339):
        return _to_timestamp(native)
    if isinstance(native, (Real, Decimal)) and not isinstance(native, bool):
        return NumberValue(native)
    return StringValue(str(native))


def _coordinates(native: Any) -> tuple[Any, Any]:
    if isinstance(native, Mapping):
        return native.get("latitude"), native.get("longitude")
    if isinstance(native, (str, bytes)):
        return None, None
    return getattr(native, "latitude", None), getattr(native, "longitude", None)


def _has_coordinates(native: Any) -> bool:
    latitude, longitude = _coordinates(native)
    return latitude is not None and longitude is not None


def _has_partial_coordinates(native: Any) -> bool:
    latitude, longitude = _coordinates(native)
    return (latitude is None) != (longitude is None)


def _to_timestamp(native: Any) -> TimestampValue:
    if isinstance(native, datetime):
        return TimestampValue(native)
    if isinstance(native, date):
        return TimestampValue(datetime(native.year, native.month, native.day, tzinfo=timezone.utc))
    return TimestampValue.parse(native.rfc3339())
