# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the generator configuration module."""

from pathlib import Path

import pytest

from declgen.workspace import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a generator config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only output-directory uses the defaults for everything else."""
    config = load_generator_config(_write_config(tmp_path, "output-directory: generated\n"))

    assert isinstance(config, GeneratorConfig)
    assert config.output_directory == "generated"
    assert config.generator_name == "declgen"
    assert config.stamp_generated is True


def test_full_config(tmp_path: Path) -> None:
    content = """\
output-directory: build/src
generator-name: acme-codegen
stamp-generated: false
"""
    config = load_generator_config(_write_config(tmp_path, content))

    assert config.output_directory == "build/src"
    assert config.generator_name == "acme-codegen"
    assert config.stamp_generated is False


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(GeneratorConfigError, match="not found"):
        load_generator_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(GeneratorConfigError, match="Invalid YAML"):
        load_generator_config(_write_config(tmp_path, "output-directory: [unclosed\n"))


def test_non_mapping(tmp_path: Path) -> None:
    with pytest.raises(GeneratorConfigError, match="must be a YAML mapping"):
        load_generator_config(_write_config(tmp_path, "- generated\n"))


def test_empty_file(tmp_path: Path) -> None:
    with pytest.raises(GeneratorConfigError):
        load_generator_config(_write_config(tmp_path, ""))


def test_missing_output_directory(tmp_path: Path) -> None:
    with pytest.raises(GeneratorConfigError, match="missing required field 'output-directory'"):
        load_generator_config(_write_config(tmp_path, "generator-name: acme\n"))


def test_unknown_field(tmp_path: Path) -> None:
    content = "output-directory: generated\nformat: tabs\n"
    with pytest.raises(GeneratorConfigError, match="unknown field"):
        load_generator_config(_write_config(tmp_path, content))


def test_blank_generator_name(tmp_path: Path) -> None:
    content = "output-directory: generated\ngenerator-name: '  '\n"
    with pytest.raises(GeneratorConfigError, match="non-empty string"):
        load_generator_config(_write_config(tmp_path, content))


def test_stamp_generated_must_be_boolean(tmp_path: Path) -> None:
    content = "output-directory: generated\nstamp-generated: sometimes\n"
    with pytest.raises(GeneratorConfigError, match="must be a boolean"):
        load_generator_config(_write_config(tmp_path, content))
