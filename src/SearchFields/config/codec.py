"""Codec configuration: timestamp precision and geo classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchFields.config.common import expect_bool, expect_int, get_section
from SearchFields.core.timestamp import FRACTION_DIGITS


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Behaviour switches for classification and wire encoding.

    Attributes:
        timestamp_fraction_digits: Minimum fractional digits of encoded
            timestamps (0, 3, 6 or 9). More are used when needed to keep the
            instant exact.
        strict_geo: Raise ``ValidationError`` for geo-shaped mappings that
            lack a coordinate instead of falling back to a string value.
    """

    timestamp_fraction_digits: int = 3
    strict_geo: bool = False


def load_codec(raw: Mapping[str, Any]) -> CodecConfig:
    """Load the optional ``codec`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "codec")
    defaults = CodecConfig()
    return CodecConfig(
        timestamp_fraction_digits=expect_int(
            section.get("timestamp_fraction_digits", defaults.timestamp_fraction_digits),
            "codec.timestamp_fraction_digits",
        ),
        strict_geo=expect_bool(section.get("strict_geo", defaults.strict_geo), "codec.strict_geo"),
    )


def check_codec(config: CodecConfig) -> None:
    if config.timestamp_fraction_digits not in FRACTION_DIGITS:
        raise ValueError(f"codec.timestamp_fraction_digits must be one of {list(FRACTION_DIGITS)}")
