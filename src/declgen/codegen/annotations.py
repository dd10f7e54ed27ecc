# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Applied annotations: markers, single default values, and named argument maps.

An annotation is immutable once built. Its shape is chosen by the factory
used to create it:

* :func:`marker` renders ``@Name``.
* :func:`single_value` renders ``@Name(value)``.
* :func:`named_values` renders ``@Name(a = 1, b = "x")`` in insertion order.

Rendering always registers the annotation's own import unit first.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass

from declgen.codegen.emitter import CodeEmitter
from declgen.model.errors import InvalidArgumentError
from declgen.model.identifiers import validate_identifier
from declgen.model.imports import ImportUnit
from declgen.model.types import DeclaredType, as_import_unit
from declgen.model.values import Value

# ###############
# Public Interface
# ###############

# Anything that identifies an annotation type.
AnnotationTypeLike = ImportUnit | DeclaredType | str


class AnnotationShape(enum.Enum):
    """The argument shape of an applied annotation."""

    MARKER = "marker"
    SINGLE_VALUE = "single-value"
    NAMED_VALUES = "named-values"


@dataclass(frozen=True)
class Annotation:
    """An annotation applied to a declaration.

    Attributes:
        unit: Import unit of the annotation type.
        shape: Which of the three argument shapes the annotation has.
        arguments: ``(name, value)`` pairs in insertion order. A single-value
            annotation holds exactly one pair named ``value``.
    """

    unit: ImportUnit
    shape: AnnotationShape
    arguments: tuple[tuple[str, Value], ...] = ()

    @property
    def name(self) -> str:
        """The annotation as written in source, without arguments (``@Name``)."""
        return "@" + self.unit.name

    @property
    def value(self) -> Value | None:
        """The default value of a single-value annotation, otherwise ``None``."""
        if self.shape is AnnotationShape.SINGLE_VALUE:
            return self.arguments[0][1]
        return None

    @property
    def values(self) -> dict[str, Value]:
        """The arguments of the annotation as an ordered mapping."""
        return dict(self.arguments)

    def generate(self, imports: set[ImportUnit]) -> str:
        """Register the annotation's import and return its source text."""
        imports.add(self.unit)
        if self.shape is AnnotationShape.MARKER:
            return self.name
        if self.shape is AnnotationShape.SINGLE_VALUE:
            return f"{self.name}({self.arguments[0][1].render(imports)})"
        rendered = ", ".join(f"{key} = {value.render(imports)}" for key, value in self.arguments)
        return f"{self.name}({rendered})"

    def render(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        """Append the annotation to *emitter* as a line of its own."""
        emitter.append_line(self.generate(imports))


def marker(annotation_type: AnnotationTypeLike) -> Annotation:
    """Create an annotation without arguments."""
    return Annotation(as_import_unit(annotation_type), AnnotationShape.MARKER)


def single_value(annotation_type: AnnotationTypeLike, value: Value) -> Annotation:
    """Create an annotation carrying one unnamed default value."""
    if value is None:
        raise InvalidArgumentError(f"Annotation {as_import_unit(annotation_type)} requires a value")
    return Annotation(as_import_unit(annotation_type), AnnotationShape.SINGLE_VALUE, (("value", value),))


def named_values(annotation_type: AnnotationTypeLike, values: Mapping[str, Value]) -> Annotation:
    """Create an annotation carrying named arguments.

    Args:
        annotation_type: The annotation type.
        values: Argument name to value; iteration order is the render order.

    Returns:
        The new :class:`Annotation`.

    Raises:
        InvalidArgumentError: If *values* is empty or an argument name is not
            a valid identifier.
    """
    unit = as_import_unit(annotation_type)
    if not values:
        raise InvalidArgumentError(f"Annotation {unit} requires at least one named value")
    arguments = tuple(
        (validate_identifier(key, f"Argument name of {unit}"), value) for key, value in values.items()
    )
    names = [key for key, _ in arguments]
    if len(set(names)) != len(names):
        raise InvalidArgumentError(f"Annotation {unit} has duplicate argument names: {names}")
    return Annotation(unit, AnnotationShape.NAMED_VALUES, arguments)

