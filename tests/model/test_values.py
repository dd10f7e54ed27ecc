# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for typed values and their literal renderings."""

import pytest

from declgen.model import (
    STRING,
    VOID,
    ArrayValue,
    IllegalStateError,
    ImportUnit,
    InvalidArgumentError,
    LiteralValue,
    PrimitiveType,
    TypeMismatchError,
    array_of,
    declared,
    enum_value,
    literal,
    value_of,
)

# ###############
# Helpers
# ###############


def _render(value) -> str:
    return value.render(set())


COLOR = declared("com.example.paint", "Color")

# ###############
# Literal Rendering
# ###############


class TestLiteralRendering:
    def test_boolean(self) -> None:
        assert _render(value_of(True)) == "true"
        assert _render(value_of(False)) == "false"

    def test_int(self) -> None:
        assert _render(value_of(42)) == "42"

    def test_byte_renders_plain(self) -> None:
        assert _render(literal(PrimitiveType.BYTE, -3)) == "-3"

    def test_long_suffix(self) -> None:
        assert _render(literal(PrimitiveType.LONG, 5)) == "5l"

    def test_short_cast(self) -> None:
        assert _render(literal(PrimitiveType.SHORT, 7)) == "(short) 7"

    def test_double_and_float_suffixes(self) -> None:
        assert _render(value_of(1.5)) == "1.5d"
        assert _render(literal(PrimitiveType.FLOAT, 2)) == "2.0f"

    def test_char(self) -> None:
        assert _render(literal(PrimitiveType.CHAR, "c")) == "'c'"
        assert _render(literal(PrimitiveType.CHAR, "'")) == "'\\''"

    def test_string_is_quoted_and_escaped(self) -> None:
        assert _render(value_of("plain")) == '"plain"'
        assert _render(value_of('say "hi"\n')) == '"say \\"hi\\"\\n"'
        assert _render(value_of("C:\\dir")) == '"C:\\\\dir"'

    def test_boxed_types_use_primitive_syntax(self) -> None:
        assert _render(literal(declared("java.lang", "Long"), 9)) == "9l"
        assert _render(literal(declared("java.lang", "Boolean"), True)) == "true"

    def test_declared_type_without_literal_form_fails_on_render(self) -> None:
        with pytest.raises(IllegalStateError):
            _render(LiteralValue(COLOR, "RED"))

    def test_void_literal_fails_on_render(self) -> None:
        with pytest.raises(IllegalStateError):
            _render(LiteralValue(VOID, 1))


class TestValueOf:
    def test_inferred_types(self) -> None:
        assert value_of(True).type is PrimitiveType.BOOLEAN
        assert value_of(1).type is PrimitiveType.INT
        assert value_of(1.0).type is PrimitiveType.DOUBLE
        assert value_of("x").type == STRING

    def test_large_int_becomes_long(self) -> None:
        value = value_of(2**40)
        assert value.type is PrimitiveType.LONG
        assert _render(value) == f"{2**40}l"

    def test_unsupported_payload(self) -> None:
        with pytest.raises(InvalidArgumentError):
            value_of(None)  # type: ignore[arg-type]

    def test_string_literal_registers_java_lang_string(self) -> None:
        imports: set[ImportUnit] = set()
        value_of("x").render(imports)
        assert imports == {ImportUnit("java.lang", "String")}

    def test_primitive_literal_registers_nothing(self) -> None:
        imports: set[ImportUnit] = set()
        value_of(3).render(imports)
        assert imports == set()


# ###############
# Factory Validation
# ###############


class TestLiteralValidation:
    def test_mismatched_payload(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            literal(PrimitiveType.INT, "seven")
        assert exc_info.value.expected is PrimitiveType.INT
        assert exc_info.value.actual == "str"

    def test_out_of_range_payload(self) -> None:
        with pytest.raises(TypeMismatchError):
            literal(PrimitiveType.BYTE, 300)

    def test_double_too_large_for_a_float_is_rejected(self) -> None:
        with pytest.raises(TypeMismatchError):
            literal(PrimitiveType.DOUBLE, 10**400)

    @pytest.mark.parametrize("payload", [float("inf"), float("nan")])
    def test_non_finite_floats_are_rejected(self, payload: float) -> None:
        with pytest.raises(TypeMismatchError):
            value_of(payload)
        with pytest.raises(TypeMismatchError):
            literal(PrimitiveType.FLOAT, payload)

    def test_float_out_of_range_is_rejected(self) -> None:
        with pytest.raises(TypeMismatchError):
            literal(PrimitiveType.FLOAT, 1e300)
        assert literal(PrimitiveType.DOUBLE, 1e300).render(set()) == "1e+300d"

    def test_char_outside_basic_plane_is_rejected(self) -> None:
        with pytest.raises(TypeMismatchError):
            literal(PrimitiveType.CHAR, "\U0001F600")

    def test_void_literal_is_illegal(self) -> None:
        with pytest.raises(IllegalStateError):
            literal(VOID, 1)

    def test_type_mismatch_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            literal(PrimitiveType.BOOLEAN, 1)


class TestInstanceOf:
    def test_matching_type(self) -> None:
        assert value_of(1).is_instance_of(PrimitiveType.INT)

    def test_different_type(self) -> None:
        assert not value_of(1).is_instance_of(PrimitiveType.LONG)

    def test_missing_target(self) -> None:
        assert not value_of(1).is_instance_of(None)

    def test_void_target(self) -> None:
        assert not value_of(1).is_instance_of(VOID)


# ###############
# Enum and Array Values
# ###############


class TestEnumValue:
    def test_renders_simple_name_and_constant(self) -> None:
        imports: set[ImportUnit] = set()
        assert enum_value(COLOR, "RED").render(imports) == "Color.RED"
        assert imports == {COLOR.unit}

    def test_requires_declared_type(self) -> None:
        with pytest.raises(InvalidArgumentError):
            enum_value(PrimitiveType.INT, "RED")  # type: ignore[arg-type]

    def test_constant_must_be_identifier(self) -> None:
        with pytest.raises(InvalidArgumentError):
            enum_value(COLOR, "NOT VALID")


class TestArrayValue:
    def test_renders_items_in_order(self) -> None:
        imports: set[ImportUnit] = set()
        value = array_of(COLOR, enum_value(COLOR, "RED"), enum_value(COLOR, "BLUE"))
        assert value.render(imports) == "{Color.RED, Color.BLUE}"
        assert imports == {COLOR.unit}

    def test_empty_array(self) -> None:
        assert _render(array_of(PrimitiveType.INT)) == "{}"

    def test_type_is_element_type(self) -> None:
        value = array_of(PrimitiveType.INT, value_of(1), value_of(2))
        assert isinstance(value, ArrayValue)
        assert value.type is PrimitiveType.INT

    def test_mismatched_item(self) -> None:
        with pytest.raises(TypeMismatchError):
            array_of(PrimitiveType.INT, value_of("x"))

    def test_void_elements(self) -> None:
        with pytest.raises(IllegalStateError):
            array_of(VOID)
