"""Tests for config parsing and validation."""

from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchFields.config import AppConfig, CodecConfig, load_config, load_config_with_defaults, parse_config_dict
from SearchFields.config.app import merge_config_dicts, parse_yaml


class TestParseConfig(unittest.TestCase):
    def test_empty_mapping_uses_defaults(self) -> None:
        cfg = parse_config_dict({})
        self.assertEqual(cfg, AppConfig())
        self.assertEqual(cfg.codec, CodecConfig(timestamp_fraction_digits=3, strict_geo=False))
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)

    def test_values_are_read(self) -> None:
        cfg = parse_config_dict(
            {
                "log": {"level": "debug", "to_file": True, "dir": "logs"},
                "codec": {"timestamp_fraction_digits": 9, "strict_geo": True},
            }
        )
        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.runtime.dir, "logs")
        self.assertEqual(cfg.codec.timestamp_fraction_digits, 9)
        self.assertTrue(cfg.codec.strict_geo)

    def test_fraction_digits_range_error_contains_key(self) -> None:
        with self.assertRaisesRegex(ValueError, "codec\\.timestamp_fraction_digits"):
            parse_config_dict({"codec": {"timestamp_fraction_digits": 4}})

    def test_type_errors_contain_key(self) -> None:
        with self.assertRaisesRegex(TypeError, "codec\\.strict_geo"):
            parse_config_dict({"codec": {"strict_geo": "yes"}})
        with self.assertRaisesRegex(TypeError, "codec\\.timestamp_fraction_digits"):
            parse_config_dict({"codec": {"timestamp_fraction_digits": True}})
        with self.assertRaisesRegex(TypeError, "codec"):
            parse_config_dict({"codec": ["strict_geo"]})

    def test_log_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict({"log": {"level": "LOUD"}})
        with self.assertRaisesRegex(ValueError, "log\\.dir"):
            parse_config_dict({"log": {"dir": "  "}})


class TestLoadConfig(unittest.TestCase):
    def test_override_merges_onto_defaults(self) -> None:
        tmp = Path(tempfile.mkdtemp())
        defaults = tmp / "default.yml"
        defaults.write_text("log:\n  level: WARNING\ncodec:\n  timestamp_fraction_digits: 6\n", encoding="utf-8")
        override = tmp / "override.yml"
        override.write_text("codec:\n  strict_geo: true\n", encoding="utf-8")

        cfg = load_config_with_defaults(override, default_path=defaults)
        self.assertEqual(cfg.runtime.level, "WARNING")
        self.assertEqual(cfg.codec.timestamp_fraction_digits, 6)
        self.assertTrue(cfg.codec.strict_geo)

    def test_missing_defaults_file_is_empty(self) -> None:
        tmp = Path(tempfile.mkdtemp())
        override = tmp / "override.yml"
        override.write_text("codec:\n  timestamp_fraction_digits: 0\n", encoding="utf-8")
        cfg = load_config_with_defaults(override, default_path=tmp / "missing.yml")
        self.assertEqual(cfg.codec.timestamp_fraction_digits, 0)

    def test_repository_default_file(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg, AppConfig())

    def test_yaml_root_must_be_mapping(self) -> None:
        with self.assertRaisesRegex(ValueError, "mapping"):
            parse_yaml("- a\n- b\n")
        self.assertEqual(parse_yaml(""), {})

    def test_merge_is_deep(self) -> None:
        merged = merge_config_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
        self.assertEqual(merged, {"a": {"x": 1, "y": 3}, "b": 1, "c": 4})


if __name__ == "__main__":
    unittest.main()
