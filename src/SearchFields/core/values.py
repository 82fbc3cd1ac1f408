"""Typed field values.

A field value is one of four kinds: string, number, geo point or timestamp.
Every value exposes its primitive through ``value`` (``GeoValue`` through
``latitude``/``longitude``), its kind through ``type`` and its sibling values
through ``values``.

Values are immutable. The sibling list of a field is a ``FieldValues``
sequence; building one binds each value to the list and to its slot index.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, overload

from SearchFields.core.timestamp import format_rfc3339, parse_rfc3339
from SearchFields.errors import ValidationError


class ValueType(str, Enum):
    """Type tag of a field value; strings carry their subtype as the tag."""

    ATOM = "atom"
    DEFAULT = "default"
    HTML = "html"
    TEXT = "text"
    GEO = "geo"
    NUMBER = "number"
    TIMESTAMP = "timestamp"


STRING_TYPES = frozenset({ValueType.ATOM, ValueType.DEFAULT, ValueType.HTML, ValueType.TEXT})


class Value(ABC):
    """Abstract base of the four value kinds.

    Subclasses provide ``type``; only ``StringValue`` sets ``lang``.
    """

    __slots__ = ("_values", "_index")

    lang: Optional[str] = None

    @property
    @abstractmethod
    def type(self) -> ValueType:
        """Type tag of this value."""

    @property
    def values(self) -> FieldValues:
        """Sibling values of the same field, this one included."""
        if not self.is_bound:
            # A value built directly by the caller forms its own one-item field.
            FieldValues((self,))
        return self._values

    @property
    def index(self) -> int:
        """Position of this value in ``values``."""
        if not self.is_bound:
            FieldValues((self,))
        return self._index

    @property
    def is_bound(self) -> bool:
        return getattr(self, "_values", None) is not None


@dataclass(frozen=True, slots=True)
class StringValue(Value):
    """Text value with a string format and optional language tag."""

    value: str
    subtype: ValueType = ValueType.DEFAULT
    lang: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(f"StringValue requires a str, got {type(self.value).__name__}")
        try:
            subtype = ValueType(self.subtype)
        except ValueError as e:
            raise ValidationError(f"Unknown string format: {self.subtype!r}") from e
        if subtype not in STRING_TYPES:
            raise ValidationError(f"Unknown string format: {self.subtype!r}")
        object.__setattr__(self, "subtype", subtype)

    @property
    def type(self) -> ValueType:
        return self.subtype

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class NumberValue(Value):
    """Numeric value.

    The wire form is integral when the number is a whole number and floating
    otherwise; see ``wire_number``.
    """

    value: Any

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (Real, Decimal)):
            raise ValidationError(f"NumberValue requires a real number, got {self.value!r}")

    @property
    def type(self) -> ValueType:
        return ValueType.NUMBER

    @property
    def is_integral(self) -> bool:
        if isinstance(self.value, int):
            return True
        as_float = float(self.value)
        return math.isfinite(as_float) and self.value == int(self.value)

    def wire_number(self) -> int | float:
        return int(self.value) if self.is_integral else float(self.value)

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True, slots=True, repr=False)
class GeoValue(Value):
    """Geographic point.

    ``str()`` gives the canonical ``"<lat>, <lon>"`` form, rendered with the
    shortest float repr so that ``GeoValue.parse(str(v)) == v``.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "latitude", float(self.latitude))
            object.__setattr__(self, "longitude", float(self.longitude))
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid geo coordinates: {self.latitude!r}, {self.longitude!r}"
            ) from e

    @classmethod
    def parse(cls, text: str) -> GeoValue:
        """Build a point from a ``"lat, lon"`` string.

        Raises:
            ValidationError: If the string does not hold exactly two
                comma-separated float components.
        """
        parts = [part.strip() for part in str(text).split(",")]
        if len(parts) != 2:
            raise ValidationError(f"Invalid geo string: {text!r}")
        try:
            return cls(float(parts[0]), float(parts[1]))
        except ValueError as e:
            raise ValidationError(f"Invalid geo string: {text!r}") from e

    @classmethod
    def from_pair(cls, pair: Any) -> GeoValue:
        """Build a point from a mapping or object with latitude/longitude."""
        if isinstance(pair, Mapping):
            return cls(pair["latitude"], pair["longitude"])
        return cls(pair.latitude, pair.longitude)

    @property
    def type(self) -> ValueType:
        return ValueType.GEO

    def __str__(self) -> str:
        return f"{self.latitude!r}, {self.longitude!r}"

    def __repr__(self) -> str:
        return f"GeoValue({self})"


@dataclass(frozen=True, slots=True)
class TimestampValue(Value):
    """Instant in time.

    ``value`` is held in UTC (naive input is taken as UTC); ``nanosecond``
    holds the digits past the microsecond that ``datetime`` cannot store.
    """

    value: datetime
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise ValidationError(f"TimestampValue requires a datetime, got {self.value!r}")
        value = self.value if self.value.tzinfo is not None else self.value.replace(tzinfo=timezone.utc)
        try:
            object.__setattr__(self, "value", value.astimezone(timezone.utc))
        except (OverflowError, ValueError) as e:
            raise ValidationError(f"Timestamp out of range in UTC: {self.value!r}") from e
        if isinstance(self.nanosecond, bool) or not isinstance(self.nanosecond, int) or not 0 <= self.nanosecond <= 999:
            raise ValidationError(f"nanosecond must be an integer in 0..999, got {self.nanosecond!r}")

    @classmethod
    def parse(cls, text: str) -> TimestampValue:
        value, nanosecond = parse_rfc3339(text)
        return cls(value, nanosecond)

    @property
    def type(self) -> ValueType:
        return ValueType.TIMESTAMP

    def rfc3339(self, min_fraction_digits: int = 3) -> str:
        return format_rfc3339(self.value, self.nanosecond, min_fraction_digits=min_fraction_digits)


class FieldValues(Sequence[Value]):
    """Ordered, immutable sibling list of one field.

    Values that already belong to another list are copied, so a value is
    never shared between two fields.
    """

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Value] = ()) -> None:
        items: list[Value] = []
        for value in values:
            if not isinstance(value, Value):
                raise TypeError(f"FieldValues holds Value instances, got {type(value).__name__}")
            if value.is_bound:
                value = replace(value)
            object.__setattr__(value, "_values", self)
            object.__setattr__(value, "_index", len(items))
            items.append(value)
        self._items: tuple[Value, ...] = tuple(items)

    @property
    def first(self) -> Value | None:
        return self._items[0] if self._items else None

    @property
    def types(self) -> tuple[ValueType, ...]:
        return tuple(value.type for value in self._items)

    @overload
    def __getitem__(self, index: int) -> Value: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Value, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldValues):
            return self._items == other._items
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FieldValues({list(self._items)!r})"
