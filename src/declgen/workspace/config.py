# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the DeclGen generator configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".declgen.yaml"


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """The parsed configuration for a DeclGen project.

    Attributes:
        output_directory: Directory (relative to the config file) receiving generated sources.
        generator_name: Name written into the ``@Generated`` annotation.
        stamp_generated: Whether generated classes carry the ``@Generated`` annotation.
    """

    output_directory: str
    generator_name: str = "declgen"
    stamp_generated: bool = True


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a DeclGen configuration file.

    Args:
        path: Path to the `.declgen.yaml` file.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file: {exc}") from exc

    return _parse_generator_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = {"output-directory", "generator-name", "stamp-generated"}


def _parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        A GeneratorConfig instance.

    Raises:
        GeneratorConfigError: If the YAML is invalid, required fields are
            missing, or unknown fields are present.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: generator config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown field(s) {', '.join(map(str, unknown))}")

    output_directory = _require_string(data, "output-directory", source_label)

    generator_name = "declgen"
    if "generator-name" in data:
        generator_name = _require_string(data, "generator-name", source_label)

    stamp_generated = True
    if "stamp-generated" in data:
        stamp_generated = data["stamp-generated"]
        if not isinstance(stamp_generated, bool):
            raise GeneratorConfigError(f"{source_label}: 'stamp-generated' must be a boolean")

    return GeneratorConfig(
        output_directory=output_directory,
        generator_name=generator_name,
        stamp_generated=stamp_generated,
    )


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required non-empty string field, raising GeneratorConfigError if missing."""
    if key not in mapping:
        raise GeneratorConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str) or not value.strip():
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value
