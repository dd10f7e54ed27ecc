# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type system representations for the DeclGen declaration model.

A type is exactly one of three variants:

* :class:`PrimitiveType`: a plain-old-data type such as ``int``.
* :class:`VoidType`: the absence of a value (only the shared :data:`VOID`).
* :class:`DeclaredType`: a reference to a named declaration that must be
  imported when used.

Assignability is deliberately exact: a declared type is assignable only to a
declared type with an equal import unit. Inheritance is not modelled.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from declgen.model.errors import InvalidArgumentError
from declgen.model.imports import ImportUnit

# ###############
# Public Interface
# ###############


class PrimitiveType(enum.Enum):
    """Primitive types supported by the declaration model."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    CHAR = "char"
    DOUBLE = "double"
    FLOAT = "float"
    INT = "int"
    LONG = "long"
    SHORT = "short"

    @property
    def simple_name(self) -> str:
        """The name used when the type is written in source."""
        return self.value

    @property
    def is_void(self) -> bool:
        return False

    def is_assignable_to(self, other: Type) -> bool:
        """A primitive is assignable only to the very same primitive."""
        return isinstance(other, PrimitiveType) and self is other

    def is_type_of(self, payload: object) -> bool:
        """Check whether a raw Python payload can be represented by this primitive."""
        if self is PrimitiveType.BOOLEAN:
            return isinstance(payload, bool)
        if self is PrimitiveType.CHAR:
            return isinstance(payload, str) and len(payload) == 1 and ord(payload) <= _CHAR_MAX
        if isinstance(payload, bool):
            return False
        if self in (PrimitiveType.DOUBLE, PrimitiveType.FLOAT):
            return isinstance(payload, (int, float)) and _fits_floating(self, payload)
        if not isinstance(payload, int):
            return False
        low, high = _INTEGER_RANGES[self]
        return low <= payload <= high

    def register_import(self, imports: set[ImportUnit]) -> None:
        """Primitives never need an import."""

    def __str__(self) -> str:
        return self.simple_name


@dataclass(frozen=True)
class VoidType:
    """The absent type, used to mark methods that return nothing.

    All instances compare equal; use the shared :data:`VOID` instance.
    """

    @property
    def simple_name(self) -> str:
        return "void"

    @property
    def is_void(self) -> bool:
        return True

    def is_assignable_to(self, other: Type) -> bool:
        """Void is never assignable, not even to itself."""
        return False

    def is_type_of(self, payload: object) -> bool:
        return False

    def register_import(self, imports: set[ImportUnit]) -> None:
        """Void never needs an import."""

    def __str__(self) -> str:
        return self.simple_name


@dataclass(frozen=True)
class DeclaredType:
    """Reference to a named declaration identified by its import unit.

    Attributes:
        unit: The import unit of the referenced declaration.
    """

    unit: ImportUnit

    @property
    def simple_name(self) -> str:
        return self.unit.name

    @property
    def qualified_name(self) -> str:
        return self.unit.qualified_name

    @property
    def is_void(self) -> bool:
        return False

    @property
    def boxed_primitive(self) -> PrimitiveType | None:
        """The primitive wrapped by this type, for the ``java.lang`` box types."""
        if self.unit.namespace != _LANG_NAMESPACE:
            return None
        return _BOXED_PRIMITIVES.get(self.unit.name)

    def is_assignable_to(self, other: Type) -> bool:
        """Declared types are assignable only to an identical declared type."""
        return isinstance(other, DeclaredType) and self.unit == other.unit

    def is_type_of(self, payload: object) -> bool:
        """Check whether a raw Python payload is a literal of this declared type.

        Only strings and the boxed primitive wrappers have literal forms;
        other declared types are populated through enum constants.
        """
        if self == STRING:
            return isinstance(payload, str)
        boxed = self.boxed_primitive
        return boxed is not None and boxed.is_type_of(payload)

    def derive_with_suffix(self, suffix: str) -> DeclaredType:
        """Return the declared type of a companion declaration named ``Name + suffix``."""
        return DeclaredType(self.unit.derive_with_suffix(suffix))

    def register_import(self, imports: set[ImportUnit]) -> None:
        imports.add(self.unit)

    def __str__(self) -> str:
        return self.qualified_name


# A declaration type: exactly one of the three variants.
Type = PrimitiveType | VoidType | DeclaredType

VOID = VoidType()

STRING = DeclaredType(ImportUnit("java.lang", "String"))


def is_assignable_to(candidate: Type, target: Type) -> bool:
    """Return whether a value of type *candidate* may be stored in *target*.

    This is a pure predicate and never raises.
    """
    return candidate.is_assignable_to(target)


def as_import_unit(reference: ImportUnit | DeclaredType | str) -> ImportUnit:
    """Resolve an import unit, declared type, or qualified name to an import unit.

    Raises:
        InvalidArgumentError: If *reference* is of none of the supported kinds,
            or is a malformed qualified name.
    """
    if isinstance(reference, ImportUnit):
        return reference
    if isinstance(reference, DeclaredType):
        return reference.unit
    if isinstance(reference, str):
        return ImportUnit.from_qualified_name(reference)
    raise InvalidArgumentError(f"Cannot resolve {reference!r} to an import unit")


def declared(namespace: str, name: str) -> DeclaredType:
    """Create a declared type from an explicit namespace and simple name."""
    return DeclaredType(ImportUnit(namespace, name))


def declared_from(qualified_name: str) -> DeclaredType:
    """Create a declared type from a fully qualified dotted name."""
    return DeclaredType(ImportUnit.from_qualified_name(qualified_name))


def parse_type(text: str) -> Type:
    """Resolve a textual type reference to a type variant.

    ``"void"`` yields :data:`VOID`, primitive names yield the matching
    :class:`PrimitiveType`, and anything else must be a fully qualified name.

    Args:
        text: The type reference, e.g. ``"int"`` or ``"com.example.Widget"``.

    Returns:
        The resolved type.

    Raises:
        InvalidArgumentError: If the text is blank or is not a qualified name.
    """
    stripped = text.strip() if isinstance(text, str) else ""
    if not stripped:
        raise InvalidArgumentError(f"Invalid type reference: {text!r}")
    if stripped == VOID.simple_name:
        return VOID
    try:
        return PrimitiveType(stripped)
    except ValueError:
        return declared_from(stripped)


# ################
# Implementation
# ################

_LANG_NAMESPACE = "java.lang"

_INTEGER_RANGES: dict[PrimitiveType, tuple[int, int]] = {
    PrimitiveType.BYTE: (-(2**7), 2**7 - 1),
    PrimitiveType.SHORT: (-(2**15), 2**15 - 1),
    PrimitiveType.INT: (-(2**31), 2**31 - 1),
    PrimitiveType.LONG: (-(2**63), 2**63 - 1),
}

# Largest code point a single UTF-16 char can hold.
_CHAR_MAX = 0xFFFF

_FLOAT_MAX = 3.4028234663852886e38


_BOXED_PRIMITIVES: dict[str, PrimitiveType] = {
    "Boolean": PrimitiveType.BOOLEAN,
    "Byte": PrimitiveType.BYTE,
    "Character": PrimitiveType.CHAR,
    "Double": PrimitiveType.DOUBLE,
    "Float": PrimitiveType.FLOAT,
    "Integer": PrimitiveType.INT,
    "Long": PrimitiveType.LONG,
    "Short": PrimitiveType.SHORT,
}


def _fits_floating(kind: PrimitiveType, payload: int | float) -> bool:
    """Whether *payload* is a finite number within the range of *kind*."""
    try:
        number = float(payload)
    except OverflowError:
        return False
    if not math.isfinite(number):
        return False
    return kind is PrimitiveType.DOUBLE or abs(number) <= _FLOAT_MAX
