# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for import units."""

import pytest

from declgen.model import ImportUnit, InvalidArgumentError, validate_identifier

# ###############
# Normal Cases
# ###############


def test_from_qualified_name_splits_on_last_dot() -> None:
    """The namespace is everything before the last dot."""
    unit = ImportUnit.from_qualified_name("a.b.c.d.EfGh")
    assert unit.namespace == "a.b.c.d"
    assert unit.name == "EfGh"


def test_qualified_name_and_str() -> None:
    unit = ImportUnit("com.example", "Widget")
    assert unit.qualified_name == "com.example.Widget"
    assert str(unit) == "com.example.Widget"


def test_structural_equality_and_hash() -> None:
    """Equal units collapse to one entry in a set."""
    imports = {ImportUnit("x.y", "Widget"), ImportUnit.from_qualified_name("x.y.Widget")}
    assert len(imports) == 1


def test_derive_with_suffix() -> None:
    derived = ImportUnit("x.y", "Widget").derive_with_suffix("Impl")
    assert derived == ImportUnit("x.y", "WidgetImpl")


def test_units_are_immutable() -> None:
    unit = ImportUnit("x.y", "Widget")
    with pytest.raises(AttributeError):
        unit.name = "Gadget"  # type: ignore[misc]


# ###############
# Error Cases
# ###############


def test_name_without_namespace_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="default namespace is not supported"):
        ImportUnit.from_qualified_name("SomeClass")


def test_leading_dot_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ImportUnit.from_qualified_name(".SomeClass")


def test_trailing_dot_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ImportUnit.from_qualified_name("com.example.")


@pytest.mark.parametrize("namespace", ["", "   "])
def test_blank_namespace_is_rejected(namespace: str) -> None:
    with pytest.raises(InvalidArgumentError):
        ImportUnit(namespace, "Widget")


def test_blank_name_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ImportUnit("com.example", " ")


@pytest.mark.parametrize("name", ["Not Valid", "2Widget", "Wid-get"])
def test_name_must_be_an_identifier(name: str) -> None:
    with pytest.raises(InvalidArgumentError):
        ImportUnit("com.example", name)


def test_qualified_name_with_invalid_simple_name_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ImportUnit.from_qualified_name("a.b.Not Valid")


def test_name_is_stripped() -> None:
    assert ImportUnit("com.example", " Widget ") == ImportUnit("com.example", "Widget")


def test_invalid_argument_is_a_value_error() -> None:
    """Callers that only know the builtin hierarchy can still catch it."""
    with pytest.raises(ValueError):
        ImportUnit("", "Widget")


# ###############
# Identifiers
# ###############


class TestValidateIdentifier:
    @pytest.mark.parametrize("name", ["count", "_hidden", "$proxy", "value2", "CONSTANT_NAME"])
    def test_valid_identifiers(self, name: str) -> None:
        assert validate_identifier(name) == name

    def test_surrounding_whitespace_is_stripped(self) -> None:
        assert validate_identifier("  count ") == "count"

    @pytest.mark.parametrize("name", ["", "   ", "2fast", "with space", "dash-ed", "dot.ted"])
    def test_invalid_identifiers(self, name: str) -> None:
        with pytest.raises(InvalidArgumentError):
            validate_identifier(name)

    def test_none_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Field name cannot be None"):
            validate_identifier(None, "Field name")  # type: ignore[arg-type]
