"""Business rules over a whole field set.

A field can have multiple values with the same or different kinds, but it
cannot have more than one number value or more than one timestamp value. The
check is opt-in: assignment and decoding never apply it.
"""

from __future__ import annotations

from collections import Counter

from SearchFields.core.fields import FieldSet
from SearchFields.core.values import ValueType
from SearchFields.errors import ValidationError

_SINGLE_VALUE_TYPES = (ValueType.NUMBER, ValueType.TIMESTAMP)


def find_value_count_violations(fields: FieldSet) -> list[tuple[str, ValueType]]:
    """Return every (field name, value type) that appears more than once."""
    violations: list[tuple[str, ValueType]] = []
    for name in fields:
        counts = Counter(fields.values_of(name).types)
        violations.extend((name, kind) for kind in _SINGLE_VALUE_TYPES if counts[kind] > 1)
    return violations


def check_value_counts(fields: FieldSet) -> None:
    """Raise ``ValidationError`` for the first field breaking the rule."""
    violations = find_value_count_violations(fields)
    if violations:
        name, kind = violations[0]
        raise ValidationError(f"Field {name!r} cannot have multiple {kind.value} values")
