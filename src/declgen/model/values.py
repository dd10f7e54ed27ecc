# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed values and their literal renderings.

A value pairs a type with a payload. Plain construction performs no
cross-validation because values are also used where no target type exists
yet (e.g. bare annotation arguments). The factory functions :func:`literal`,
:func:`enum_value`, and :func:`array_of` check the payload against the type
and fail fast.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass

from declgen.model.errors import IllegalStateError, InvalidArgumentError, TypeMismatchError
from declgen.model.identifiers import validate_identifier
from declgen.model.imports import ImportUnit
from declgen.model.types import STRING, DeclaredType, PrimitiveType, Type, is_assignable_to

# ###############
# Public Interface
# ###############

# Raw payload of a literal value.
Payload = bool | int | float | str


@dataclass(frozen=True)
class Value(abc.ABC):
    """A typed value that can be rendered as source text.

    Attributes:
        type: The type of the value.
    """

    type: Type

    def is_instance_of(self, target: Type | None) -> bool:
        """Return whether this value may be stored in an element of type *target*.

        Returns ``False`` when either this value's type or *target* is unset.
        """
        if target is None or self.type is None:
            return False
        return is_assignable_to(self.type, target)

    @abc.abstractmethod
    def render(self, imports: set[ImportUnit]) -> str:
        """Return the literal source text and register any required import."""


@dataclass(frozen=True)
class LiteralValue(Value):
    """A primitive, boxed-primitive, or string literal."""

    payload: Payload

    def render(self, imports: set[ImportUnit]) -> str:
        if self.type.is_void:
            raise IllegalStateError("A void type cannot hold any value")
        self.type.register_import(imports)

        if isinstance(self.type, PrimitiveType):
            return _format_primitive(self.type, self.payload)
        if self.type == STRING:
            return _quote(str(self.payload), '"')
        boxed = self.type.boxed_primitive
        if boxed is None:
            raise IllegalStateError(f"{self.type} has no literal form")
        return _format_primitive(boxed, self.payload)


@dataclass(frozen=True)
class EnumValue(Value):
    """A reference to a constant of a declared enumeration, e.g. ``Color.RED``."""

    constant: str

    def render(self, imports: set[ImportUnit]) -> str:
        self.type.register_import(imports)
        return f"{self.type.simple_name}.{self.constant}"


@dataclass(frozen=True)
class ArrayValue(Value):
    """An array initializer such as ``{Color.RED, Color.BLUE}``.

    The ``type`` of an array value is the type of its elements.
    """

    items: tuple[Value, ...] = ()

    def render(self, imports: set[ImportUnit]) -> str:
        self.type.register_import(imports)
        return "{" + ", ".join(item.render(imports) for item in self.items) + "}"


def value_of(payload: Payload) -> LiteralValue:
    """Create a literal whose type is inferred from the Python payload.

    ``bool`` maps to ``boolean``, ``int`` to ``int`` (``long`` when out of the
    32-bit range), ``float`` to ``double``, and ``str`` to ``String``.

    Raises:
        InvalidArgumentError: If the payload has no literal mapping.
        TypeMismatchError: If a float payload is infinite or NaN.
    """
    if isinstance(payload, bool):
        return LiteralValue(PrimitiveType.BOOLEAN, payload)
    if isinstance(payload, int):
        if PrimitiveType.INT.is_type_of(payload):
            return LiteralValue(PrimitiveType.INT, payload)
        return literal(PrimitiveType.LONG, payload)
    if isinstance(payload, float):
        return literal(PrimitiveType.DOUBLE, payload)
    if isinstance(payload, str):
        return LiteralValue(STRING, payload)
    raise InvalidArgumentError(f"No literal form for payload of type {type(payload).__name__}")


def literal(value_type: Type, payload: Payload) -> LiteralValue:
    """Create a literal of an explicit type, checking the payload against it.

    Args:
        value_type: The type of the literal.
        payload: The raw Python payload.

    Returns:
        The validated :class:`LiteralValue`.

    Raises:
        IllegalStateError: If *value_type* is void.
        TypeMismatchError: If the payload cannot be represented by *value_type*.
    """
    if value_type.is_void:
        raise IllegalStateError("A void type cannot hold any value")
    if not value_type.is_type_of(payload):
        raise TypeMismatchError("Invalid literal", expected=value_type, actual=type(payload).__name__)
    return LiteralValue(value_type, payload)


def enum_value(enum_type: DeclaredType, constant: str) -> EnumValue:
    """Create a reference to the constant *constant* of *enum_type*.

    Raises:
        InvalidArgumentError: If *enum_type* is not declared or the constant
            is not a valid identifier.
    """
    if not isinstance(enum_type, DeclaredType):
        raise InvalidArgumentError(f"Enumeration constants require a declared type, got {enum_type}")
    return EnumValue(enum_type, validate_identifier(constant, "Enum constant"))


def array_of(element_type: Type, *items: Value) -> ArrayValue:
    """Create an array value whose items must all be instances of *element_type*.

    Raises:
        IllegalStateError: If *element_type* is void.
        TypeMismatchError: If any item is not assignable to *element_type*.
    """
    if element_type.is_void:
        raise IllegalStateError("An array cannot hold void elements")
    for item in items:
        if not item.is_instance_of(element_type):
            raise TypeMismatchError("Array element type mismatch", expected=element_type, actual=item.type)
    return ArrayValue(element_type, tuple(items))


# ################
# Implementation
# ################

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _quote(text: str, quote: str) -> str:
    """Wrap *text* in *quote*, escaping backslashes, control characters, and the quote."""
    escaped = "".join(_ESCAPES.get(ch, "\\" + ch if ch == quote else ch) for ch in text)
    return f"{quote}{escaped}{quote}"


def _format_primitive(kind: PrimitiveType, payload: Payload) -> str:
    """Render a payload using the literal syntax of the primitive *kind*."""
    if kind is PrimitiveType.BOOLEAN:
        return "true" if payload else "false"
    if kind is PrimitiveType.CHAR:
        return _quote(str(payload), "'")
    if kind is PrimitiveType.LONG:
        return f"{payload}l"
    if kind is PrimitiveType.SHORT:
        return f"(short) {payload}"
    if kind is PrimitiveType.DOUBLE:
        return f"{float(payload)!r}d"
    if kind is PrimitiveType.FLOAT:
        return f"{float(payload)!r}f"
    return str(payload)
