# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Method declarations and the builders that validate them per class kind.

A method is a named element whose type is the return type. Parameters are
kept in append order, which is the order they appear at the call site.
Methods without an implementation render as a signature ending in ``;``.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from declgen.codegen.annotations import Annotation
from declgen.codegen.elements import NamedElement, Parameter, Visibility
from declgen.codegen.emitter import CodeEmitter
from declgen.model.errors import InvalidArgumentError
from declgen.model.imports import ImportUnit
from declgen.model.types import Type

if TYPE_CHECKING:
    from declgen.codegen.classes import ClassDecl

# ###############
# Public Interface
# ###############


class Method(NamedElement):
    """A method declaration with ordered parameters and an optional body.

    Attributes:
        visibility: Access modifier of the method.
    """

    def __init__(
        self,
        return_type: Type,
        name: str,
        *,
        visibility: Visibility = Visibility.PUBLIC,
        implementation: list[str] | None = None,
    ) -> None:
        super().__init__(return_type, name)
        self.visibility = visibility
        self._parameters: list[Parameter] = []
        self._implementation = list(implementation) if implementation is not None else None

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(self._parameters)

    @property
    def implementation(self) -> tuple[str, ...] | None:
        """Body lines, or ``None`` when the method has no implementation."""
        if self._implementation is None:
            return None
        return tuple(self._implementation)

    @property
    def has_implementation(self) -> bool:
        return self._implementation is not None

    def add_parameter(self, parameter: Parameter) -> None:
        """Append a parameter after the ones already declared.

        Raises:
            InvalidArgumentError: If a parameter with the same name exists.
        """
        if any(existing.name == parameter.name for existing in self._parameters):
            raise InvalidArgumentError(f"Method '{self.name}' already has a parameter named '{parameter.name}'")
        self._parameters.append(parameter)

    def _render_self(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        self.type.register_import(imports)
        emitter.append_line(self._signature(imports))
        if self._implementation is None:
            return
        emitter.indent()
        for line in self._implementation:
            if line:
                emitter.append_line(line)
            else:
                emitter.blank_line()
        emitter.de_indent()
        emitter.append_line("}")

    def _signature(self, imports: set[ImportUnit]) -> str:
        parameters = ", ".join(parameter.generate(imports) for parameter in self._parameters)
        ending = " {" if self.has_implementation else ";"
        return f"{self._signature_start()}{self.type.simple_name} {self.name}({parameters}){ending}"

    @abc.abstractmethod
    def _signature_start(self) -> str:
        """Modifiers written before the return type."""


class ClassMethod(Method):
    """A method of a class; without a body it is written as ``abstract``."""

    def _signature_start(self) -> str:
        start = self.visibility.prefix
        if not self.has_implementation:
            start += "abstract "
        return start


class InterfaceMethod(Method):
    """A method of an interface; a public body makes it a ``default`` method."""

    def _signature_start(self) -> str:
        if self.visibility is Visibility.PUBLIC:
            return "default " if self.has_implementation else ""
        return self.visibility.prefix


class MethodBuilder(abc.ABC):
    """Collects the parts of a method and adds it to its class on :meth:`build`.

    Every setter returns the builder so calls can be chained::

        cls.build_method(PrimitiveType.INT, "count").add_code("return 0;").build()
    """

    def __init__(self, owner: ClassDecl, return_type: Type, name: str) -> None:
        self._owner = owner
        self._return_type = return_type
        self._name = name
        self._visibility = Visibility.PUBLIC
        self._parameters: list[Parameter] = []
        self._annotations: list[Annotation] = []
        self._code: list[str] | None = None

    @property
    def visibility(self) -> Visibility:
        return self._visibility

    @property
    def has_code(self) -> bool:
        return self._code is not None

    def set_visibility(self, visibility: Visibility) -> MethodBuilder:
        self._visibility = visibility
        return self

    def add_parameter(self, parameter: Parameter) -> MethodBuilder:
        self._parameters.append(parameter)
        return self

    def add_annotation(self, annotation: Annotation) -> MethodBuilder:
        self._annotations.append(annotation)
        return self

    def add_code(self, *lines: str) -> MethodBuilder:
        """Append body lines; calling without lines gives the method an empty body."""
        if self._code is None:
            self._code = []
        self._code.extend(lines)
        return self

    def build(self) -> Method:
        """Validate the collected parts, create the method, and add it to the class.

        Returns:
            The created :class:`Method`.

        Raises:
            InvalidArgumentError: If the combination of visibility and body is
                not allowed for the owning class kind.
        """
        self._validate()
        method = self._create_method()
        for parameter in self._parameters:
            method.add_parameter(parameter)
        for annotation in self._annotations:
            method.annotate(annotation)
        self._owner.add_method(method)
        return method

    @abc.abstractmethod
    def _validate(self) -> None:
        """Raise :class:`InvalidArgumentError` for combinations the class kind forbids."""

    @abc.abstractmethod
    def _create_method(self) -> Method:
        """Instantiate the method variant matching the class kind."""


class ConcreteMethodBuilder(MethodBuilder):
    """Builds methods of a concrete class, which must all have a body."""

    def _validate(self) -> None:
        if not self.has_code:
            raise InvalidArgumentError(f"Concrete method '{self._name}' must have an implementation")

    def _create_method(self) -> Method:
        return ClassMethod(self._return_type, self._name, visibility=self._visibility, implementation=self._code)


class AbstractMethodBuilder(MethodBuilder):
    """Builds methods of an abstract class; abstract methods cannot be private."""

    def _validate(self) -> None:
        if self._visibility is Visibility.PRIVATE and not self.has_code:
            raise InvalidArgumentError(f"Abstract method '{self._name}' cannot be private")

    def _create_method(self) -> Method:
        return ClassMethod(self._return_type, self._name, visibility=self._visibility, implementation=self._code)


class InterfaceMethodBuilder(MethodBuilder):
    """Builds interface methods: public, or private when they have a body."""

    def _validate(self) -> None:
        if self._visibility is Visibility.PUBLIC:
            return
        if self._visibility is Visibility.PRIVATE and self.has_code:
            return
        raise InvalidArgumentError(
            f"Interface method '{self._name}' can only be public, or private if it has an implementation"
        )

    def _create_method(self) -> Method:
        return InterfaceMethod(self._return_type, self._name, visibility=self._visibility, implementation=self._code)
