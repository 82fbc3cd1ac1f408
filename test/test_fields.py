"""Tests for the FieldSet container."""

from __future__ import annotations

import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchFields.config import CodecConfig
from SearchFields.core.fields import FieldSet
from SearchFields.core.values import GeoValue, NumberValue, StringValue, TimestampValue, ValueType
from SearchFields.errors import ValidationError


class TestFieldSet(unittest.TestCase):
    def test_multi_value_field(self) -> None:
        fields = FieldSet()
        fields.set("tags", ["a", "b", "c"])

        representative = fields.get("tags")
        self.assertIsInstance(representative, StringValue)
        self.assertEqual(representative.value, "a")
        siblings = representative.values
        self.assertEqual([value.value for value in siblings], ["a", "b", "c"])
        self.assertTrue(all(isinstance(value, StringValue) for value in siblings))
        self.assertEqual([value.index for value in siblings], [0, 1, 2])
        self.assertIs(fields.values_of("tags"), siblings)

    def test_set_returns_representative(self) -> None:
        fields = FieldSet()
        self.assertEqual(fields.set("n", 7), NumberValue(7))

    def test_mixed_types_share_one_list(self) -> None:
        fields = FieldSet()
        when = datetime(2024, 1, 1, tzinfo=timezone.utc)
        fields["mixed"] = ["a", 1, when, {"latitude": 1, "longitude": 2}]
        self.assertEqual(
            fields.values_of("mixed").types,
            (ValueType.DEFAULT, ValueType.NUMBER, ValueType.TIMESTAMP, ValueType.GEO),
        )
        self.assertEqual(fields["mixed"].values[2], TimestampValue(when))

    def test_missing_key(self) -> None:
        fields = FieldSet()
        self.assertIsNone(fields.get("nope"))
        with self.assertRaises(KeyError):
            fields["nope"]
        self.assertNotIn("nope", fields)

    def test_empty_assignment_keeps_name(self) -> None:
        fields = FieldSet()
        fields["empty"] = []
        self.assertIn("empty", fields)
        self.assertIsNone(fields["empty"])
        self.assertEqual(len(fields.values_of("empty")), 0)

    def test_reassignment_replaces_values(self) -> None:
        fields = FieldSet()
        fields["title"] = ["old", "older"]
        old = fields["title"]
        fields["title"] = "new"
        self.assertEqual(fields["title"].value, "new")
        self.assertEqual(len(fields.values_of("title")), 1)
        self.assertEqual([value.value for value in old.values], ["old", "older"])

    def test_reusing_values_copies_them(self) -> None:
        source = FieldSet({"tags": ["a", "b"]})
        target = FieldSet()
        target["labels"] = source["tags"].values
        self.assertEqual(target.values_of("labels"), source.values_of("tags"))
        self.assertIsNot(target["labels"], source["tags"])
        self.assertIs(source["tags"].values, source.values_of("tags"))

    def test_items_iterate_in_insertion_order(self) -> None:
        fields = FieldSet({"b": 1, "a": "x", "c": [2.5, 3.5]})
        self.assertEqual(list(fields), ["b", "a", "c"])
        self.assertEqual(
            list(fields.items()),
            [("b", NumberValue(1)), ("a", StringValue("x")), ("c", NumberValue(2.5))],
        )
        self.assertEqual(len(fields), 3)

    def test_delete(self) -> None:
        fields = FieldSet({"a": 1})
        del fields["a"]
        self.assertEqual(len(fields), 0)

    def test_field_name_must_be_string(self) -> None:
        fields = FieldSet()
        with self.assertRaises(TypeError):
            fields[3] = "x"  # type: ignore[index]

    def test_copy_constructor_keeps_siblings(self) -> None:
        source = FieldSet({"tags": ["a", "b"], "where": {"latitude": 1, "longitude": 2}})
        copy = FieldSet(source)
        self.assertEqual(copy.values_of("tags"), source.values_of("tags"))
        self.assertEqual(copy["where"], GeoValue(1.0, 2.0))

    def test_strict_geo_config(self) -> None:
        fields = FieldSet(config=CodecConfig(strict_geo=True))
        with self.assertRaises(ValidationError):
            fields["where"] = {"latitude": 1}

    def test_wire_shortcuts(self) -> None:
        fields = FieldSet({"n": 42})
        raw = fields.to_wire()
        self.assertEqual(raw, {"n": {"values": [{"numberValue": 42}]}})
        self.assertEqual(FieldSet.from_wire(raw), fields)

    def test_equality_compares_all_siblings(self) -> None:
        self.assertEqual(FieldSet({"t": ["a", "b"]}), FieldSet({"t": ["a", "b"]}))
        self.assertNotEqual(FieldSet({"t": ["a", "b"]}), FieldSet({"t": ["a", "zzz"]}))
        self.assertNotEqual(FieldSet({"t": ["a", "b"]}), FieldSet({"t": ["a"]}))
        self.assertNotEqual(FieldSet({"t": "a"}), {"t": StringValue("a")})


if __name__ == "__main__":
    unittest.main()
