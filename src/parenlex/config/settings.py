# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the parenlex configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".parenlex.yaml"

OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class LexConfig:
    """Settings for the parenlex command-line interface.

    Attributes:
        output_format: How ``parenlex tokenize`` prints tokens, ``text`` or ``json``.
        color: Whether text output is colorized.
    """

    output_format: str = "text"
    color: bool = True


DEFAULT_CONFIG_TEXT = (
    "# parenlex configuration\n"
    "output-format: text\n"
    "color: true\n"
)


def load_config(path: Path) -> LexConfig:
    """Load and parse a parenlex configuration file.

    Args:
        path: Path to the ``.parenlex.yaml`` file.

    Returns:
        A LexConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


def find_config(directory: Path) -> LexConfig:
    """Load ``.parenlex.yaml`` from *directory*, or return the defaults if there is none."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return LexConfig()
    return load_config(path)


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"output-format", "color"})


def _parse_config(text: str, source_label: str = "<string>") -> LexConfig:
    """Parse configuration YAML text into a LexConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field is unknown or mistyped.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return LexConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = LexConfig()
    if "output-format" in data:
        output_format = data["output-format"]
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"{source_label}: 'output-format' must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        config.output_format = output_format
    if "color" in data:
        color = data["color"]
        if not isinstance(color, bool):
            raise ConfigError(f"{source_label}: 'color' must be a boolean")
        config.color = color
    return config
