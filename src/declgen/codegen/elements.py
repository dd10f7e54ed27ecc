# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration elements: the annotated, renderable building blocks of a class.

Every declaration renders in two phases. :meth:`Element.render` first renders
the attached annotations in order and then delegates to the element's own
``_render_self`` hook, so annotation handling exists in exactly one place.
"""

from __future__ import annotations

import abc
import enum
from collections.abc import Mapping

from declgen.codegen.annotations import (
    Annotation,
    AnnotationTypeLike,
    marker,
    named_values,
    single_value,
)
from declgen.codegen.emitter import CodeEmitter
from declgen.model.errors import IllegalStateError, InvalidArgumentError, TypeMismatchError
from declgen.model.identifiers import validate_identifier
from declgen.model.imports import ImportUnit
from declgen.model.types import Type
from declgen.model.values import Value

# ###############
# Public Interface
# ###############


class Visibility(enum.Enum):
    """Access modifiers a declaration can carry."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    PACKAGE = "package"

    @property
    def prefix(self) -> str:
        """The modifier followed by a space, or nothing for package visibility."""
        if self is Visibility.PACKAGE:
            return ""
        return self.value + " "


class Element(abc.ABC):
    """Base class of every declaration: a name plus ordered annotations."""

    def __init__(self, name: str) -> None:
        self._name = validate_identifier(name, f"{type(self).__name__} name")
        self._annotations: list[Annotation] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        """Annotations in attachment (and render) order."""
        return tuple(self._annotations)

    def annotate(
        self,
        annotation: Annotation | AnnotationTypeLike,
        value: Value | Mapping[str, Value] | None = None,
    ) -> Annotation:
        """Attach an annotation to this element.

        Args:
            annotation: A pre-built :class:`Annotation`, or the annotation type
                (import unit, declared type, or qualified name).
            value: ``None`` for a marker, a single :class:`Value` for a
                default-value annotation, or a mapping of argument names to
                values.

        Returns:
            The annotation that was attached.

        Raises:
            InvalidArgumentError: If a pre-built annotation is combined with a
                value, or the annotation arguments are invalid.
        """
        if isinstance(annotation, Annotation):
            if value is not None:
                raise InvalidArgumentError("A pre-built annotation cannot be given additional values")
            applied = annotation
        elif value is None:
            applied = marker(annotation)
        elif isinstance(value, Mapping):
            applied = named_values(annotation, value)
        else:
            applied = single_value(annotation, value)
        self._annotations.append(applied)
        return applied

    def render(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        """Render the annotations and then the element itself into *emitter*.

        Args:
            emitter: The emitter collecting the source text.
            imports: Shared import set; every referenced declared type is added.
        """
        for annotation in self._annotations:
            annotation.render(emitter, imports)
        self._render_self(emitter, imports)

    @abc.abstractmethod
    def _render_self(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        """Render what is specific to this kind of element."""


class NamedElement(Element):
    """An element with a type and, optionally, a value of that type.

    Attaching a value requires a non-void type whose assignability accepts
    the value's type. Both checks run at construction.
    """

    def __init__(self, element_type: Type, name: str, value: Value | None = None) -> None:
        super().__init__(name)
        if value is not None:
            if element_type.is_void:
                raise IllegalStateError(f"{type(self).__name__} '{self.name}' cannot have a void type")
            if not value.is_instance_of(element_type):
                raise TypeMismatchError(
                    f"Type mismatch for {type(self).__name__.lower()} '{self.name}'",
                    expected=element_type,
                    actual=value.type,
                )
        self._type = element_type
        self._value = value

    @property
    def type(self) -> Type:
        return self._type

    @property
    def value(self) -> Value | None:
        return self._value


class Parameter(NamedElement):
    """A method parameter. Its annotations render inline, before the type."""

    def __init__(self, parameter_type: Type, name: str) -> None:
        if parameter_type.is_void:
            raise IllegalStateError(f"Parameter '{name}' cannot have a void type")
        super().__init__(parameter_type, name)

    def generate(self, imports: set[ImportUnit]) -> str:
        """Return the inline form ``@A @B(x) Type name`` and register imports."""
        parts = [annotation.generate(imports) for annotation in self._annotations]
        parts.append(self._declaration(imports))
        return " ".join(parts)

    def _render_self(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        emitter.append_line(self._declaration(imports))

    def _declaration(self, imports: set[ImportUnit]) -> str:
        self.type.register_import(imports)
        return f"{self.type.simple_name} {self.name}"


class Field(NamedElement):
    """A field declaration, optionally initialized with a value."""

    def __init__(
        self,
        field_type: Type,
        name: str,
        value: Value | None = None,
        *,
        visibility: Visibility = Visibility.PRIVATE,
        static: bool = False,
        final: bool = False,
    ) -> None:
        if field_type.is_void:
            raise IllegalStateError(f"Field '{name}' cannot have a void type")
        super().__init__(field_type, name, value)
        self.visibility = visibility
        self.static = static
        self.final = final

    def _render_self(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        self.type.register_import(imports)
        code = self.visibility.prefix
        if self.static:
            code += "static "
        if self.final:
            code += "final "
        code += f"{self.type.simple_name} {self.name}"
        if self.value is not None:
            code += f" = {self.value.render(imports)}"
        emitter.append_line(code + ";")
