"""Tests for the single number/timestamp value rule."""

from __future__ import annotations

import sys
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchFields.core.fields import FieldSet
from SearchFields.core.rules import check_value_counts, find_value_count_violations
from SearchFields.core.values import ValueType
from SearchFields.errors import ValidationError


class TestValueCounts(unittest.TestCase):
    def test_allows_one_of_each_kind(self) -> None:
        fields = FieldSet({"f": ["a", "b", 1, datetime(2024, 1, 1)], "g": []})
        self.assertEqual(find_value_count_violations(fields), [])
        check_value_counts(fields)

    def test_reports_every_violation(self) -> None:
        fields = FieldSet(
            {
                "ok": 1,
                "numbers": [1, 2],
                "times": [datetime(2024, 1, 1), datetime(2024, 1, 2), 3, 4],
            }
        )
        self.assertEqual(
            find_value_count_violations(fields),
            [
                ("numbers", ValueType.NUMBER),
                ("times", ValueType.NUMBER),
                ("times", ValueType.TIMESTAMP),
            ],
        )

    def test_check_raises_for_first_field(self) -> None:
        fields = FieldSet({"numbers": [1, 2.5]})
        with self.assertRaisesRegex(ValidationError, "'numbers' cannot have multiple number values"):
            check_value_counts(fields)

    def test_assignment_does_not_enforce(self) -> None:
        fields = FieldSet()
        fields["numbers"] = [1, 2, 3]
        self.assertEqual(len(fields.values_of("numbers")), 3)


if __name__ == "__main__":
    unittest.main()
