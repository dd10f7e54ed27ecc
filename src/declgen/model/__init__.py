# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration model for DeclGen (types, import units, values, errors)."""

from declgen.model.errors import (
    DeclarationError,
    IllegalStateError,
    InvalidArgumentError,
    TypeMismatchError,
)
from declgen.model.identifiers import validate_identifier
from declgen.model.imports import ImportUnit
from declgen.model.types import (
    STRING,
    VOID,
    DeclaredType,
    PrimitiveType,
    Type,
    VoidType,
    as_import_unit,
    declared,
    declared_from,
    is_assignable_to,
    parse_type,
)
from declgen.model.values import (
    ArrayValue,
    EnumValue,
    LiteralValue,
    Payload,
    Value,
    array_of,
    enum_value,
    literal,
    value_of,
)

__all__ = [
    # Errors
    "DeclarationError",
    "IllegalStateError",
    "InvalidArgumentError",
    "TypeMismatchError",
    # Import units
    "ImportUnit",
    "validate_identifier",
    # Type system
    "PrimitiveType",
    "VoidType",
    "DeclaredType",
    "Type",
    "VOID",
    "STRING",
    "as_import_unit",
    "declared",
    "declared_from",
    "is_assignable_to",
    "parse_type",
    # Values
    "Payload",
    "Value",
    "LiteralValue",
    "EnumValue",
    "ArrayValue",
    "value_of",
    "literal",
    "enum_value",
    "array_of",
]
