"""Field container.

A ``FieldSet`` maps each field name to the field's representative value: the
first of its sibling values. The complete list stays reachable through
``representative.values`` or ``FieldSet.values_of``.

A field may hold values of different kinds. Nothing here limits how many
number or timestamp values a field holds; see ``SearchFields.core.rules``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping, MutableMapping, Optional

from SearchFields.config.codec import CodecConfig
from SearchFields.core.classify import from_native_values
from SearchFields.core.values import FieldValues, Value

if TYPE_CHECKING:
    from SearchFields.wire.encode import WireDocument


class FieldSet(MutableMapping[str, Optional[Value]]):
    """Ordered mapping of field name to representative value.

    ``fields[name] = native`` classifies one native value or a list of them
    into a new sibling list. Lookup returns only the first value, or ``None``
    for a field that has no values (e.g. assigned an empty list).
    """

    def __init__(self, natives: Mapping[str, Any] | None = None, *, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()
        self._fields: dict[str, FieldValues] = {}
        if isinstance(natives, FieldSet):
            for name in natives:
                self.set_values(name, natives.values_of(name))
        elif natives:
            for name, native in natives.items():
                self[name] = native

    @classmethod
    def from_wire(cls, raw: Mapping[str, Any], *, config: CodecConfig | None = None) -> FieldSet:
        from SearchFields.wire.decode import decode

        return decode(raw, config=config)

    def to_wire(self) -> WireDocument:
        from SearchFields.wire.encode import encode

        return encode(self)

    def set(self, name: str, natives: Any) -> Value | None:
        """Assign native value(s) to a field and return its representative."""
        self[name] = natives
        return self[name]

    def set_values(self, name: str, values: Iterable[Value]) -> Value | None:
        """Assign already-built values to a field and return its representative."""
        siblings = FieldValues(values)
        self._fields[_check_name(name)] = siblings
        return siblings.first

    def values_of(self, name: str) -> FieldValues:
        """Return every value of a field, representative first."""
        return self._fields[name]

    def __setitem__(self, name: str, natives: Any) -> None:
        values = from_native_values(natives, strict_geo=self.config.strict_geo)
        self.set_values(name, values)

    def __getitem__(self, name: str) -> Value | None:
        return self._fields[name].first

    def __delitem__(self, name: str) -> None:
        del self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        # Compares every sibling, not only the representatives.
        if isinstance(other, FieldSet):
            return self._fields == other._fields
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{name!r}: {list(values)!r}" for name, values in self._fields.items())
        return f"FieldSet({{{body}}})"


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Field name must be a string, got {type(name).__name__}")
    return name
