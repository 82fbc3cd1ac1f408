"""Public configuration API for SearchFields."""

from __future__ import annotations

from SearchFields.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from SearchFields.config.codec import CodecConfig
from SearchFields.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "CodecConfig",
    "RuntimeConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
