# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the parenlex CLI."""

from parenlex.config.settings import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_TEXT,
    OUTPUT_FORMATS,
    ConfigError,
    LexConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG_TEXT",
    "OUTPUT_FORMATS",
    "ConfigError",
    "LexConfig",
    "find_config",
    "load_config",
]
