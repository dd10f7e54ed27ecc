# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Top-level class declarations and whole-file source generation.

:meth:`ClassDecl.generate_code` renders the class body first, collecting
every referenced declared type into one import set, and then prefixes the
body with the ``package`` line and a sorted, deduplicated import block.
"""

from __future__ import annotations

import enum
import logging
from datetime import datetime

from declgen.codegen.annotations import Annotation, named_values
from declgen.codegen.elements import Element, Field, Visibility
from declgen.codegen.emitter import CodeEmitter
from declgen.codegen.methods import (
    AbstractMethodBuilder,
    ConcreteMethodBuilder,
    InterfaceMethodBuilder,
    Method,
    MethodBuilder,
)
from declgen.model.errors import InvalidArgumentError
from declgen.model.imports import ImportUnit
from declgen.model.types import DeclaredType, Type, as_import_unit
from declgen.model.values import value_of

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

GENERATED_ANNOTATION = ImportUnit("javax.annotation.processing", "Generated")

# Namespace whose types are visible without an import.
IMPLICIT_NAMESPACE = "java.lang"


class ClassKind(enum.Enum):
    """The kinds of top-level declaration that can be generated."""

    CLASS = "class"
    ABSTRACT = "abstract class"
    INTERFACE = "interface"


class ClassDecl(Element):
    """A top-level class, abstract class, or interface declaration.

    Attributes:
        kind: Which kind of declaration this is.
        visibility: Access modifier; only public and package are allowed.
    """

    def __init__(
        self,
        unit: ImportUnit | DeclaredType | str,
        *,
        kind: ClassKind = ClassKind.CLASS,
        visibility: Visibility = Visibility.PUBLIC,
    ) -> None:
        resolved = as_import_unit(unit)
        super().__init__(resolved.name)
        if visibility not in (Visibility.PUBLIC, Visibility.PACKAGE):
            raise InvalidArgumentError(f"Top-level {kind.value} '{resolved}' cannot be {visibility.value}")
        self._unit = resolved
        self.kind = kind
        self.visibility = visibility
        self._fields: list[Field] = []
        self._methods: list[Method] = []

    @property
    def unit(self) -> ImportUnit:
        return self._unit

    @property
    def type(self) -> DeclaredType:
        return DeclaredType(self._unit)

    @property
    def fields(self) -> tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def methods(self) -> tuple[Method, ...]:
        return tuple(self._methods)

    def add_field(self, field: Field) -> None:
        """Append a field declaration.

        Raises:
            InvalidArgumentError: If a field with the same name exists, or a
                field of an interface is private or protected.
        """
        if self.kind is ClassKind.INTERFACE and field.visibility in (Visibility.PRIVATE, Visibility.PROTECTED):
            raise InvalidArgumentError(f"Interface field '{field.name}' cannot be {field.visibility.value}")
        if any(existing.name == field.name for existing in self._fields):
            raise InvalidArgumentError(f"{self._unit} already has a field named '{field.name}'")
        self._fields.append(field)

    def add_method(self, method: Method) -> None:
        """Append a method declaration. Usually called by :meth:`MethodBuilder.build`."""
        self._methods.append(method)

    def build_method(self, return_type: Type, name: str) -> MethodBuilder:
        """Start building a method whose rules match this class kind."""
        if self.kind is ClassKind.INTERFACE:
            return InterfaceMethodBuilder(self, return_type, name)
        if self.kind is ClassKind.ABSTRACT:
            return AbstractMethodBuilder(self, return_type, name)
        return ConcreteMethodBuilder(self, return_type, name)

    def stamp_generated(self, generator: str = "declgen", timestamp: str | None = None) -> Annotation:
        """Mark the class with ``@Generated(value = generator, date = timestamp)``.

        Args:
            generator: Name of the generating tool.
            timestamp: Generation time; defaults to the current time.

        Returns:
            The annotation that was attached.
        """
        date = timestamp if timestamp is not None else iso8601_timestamp()
        return self.annotate(
            named_values(GENERATED_ANNOTATION, {"value": value_of(generator), "date": value_of(date)})
        )

    def collect_imports(self) -> set[ImportUnit]:
        """Return every import unit referenced by the class, deduplicated."""
        imports: set[ImportUnit] = set()
        self.render(CodeEmitter(), imports)
        return imports

    def generate_code(self) -> str:
        """Render the complete source file of the class.

        Returns:
            The ``package`` line, the import block, and the class body.
        """
        body = CodeEmitter()
        imports: set[ImportUnit] = set()
        self.render(body, imports)

        preamble = CodeEmitter()
        preamble.append_line(f"package {self._unit.namespace};")
        preamble.blank_line()
        import_lines = [f"import {unit.qualified_name};" for unit in self._required_imports(imports)]
        for line in import_lines:
            preamble.append_line(line)
        if import_lines:
            preamble.blank_line()

        logger.debug("Generated %s with %d import(s)", self._unit, len(import_lines))
        return preamble.result() + body.result()

    def _render_self(self, emitter: CodeEmitter, imports: set[ImportUnit]) -> None:
        emitter.append_line(f"{self.visibility.prefix}{self.kind.value} {self.name} {{")
        emitter.blank_line()
        emitter.indent()
        for field in self._fields:
            field.render(emitter, imports)
        if self._fields:
            emitter.blank_line()
        for method in self._methods:
            method.render(emitter, imports)
            emitter.blank_line()
        emitter.de_indent()
        emitter.append_line("}")

    def _required_imports(self, imports: set[ImportUnit]) -> list[ImportUnit]:
        """Imports that must be written out, sorted by qualified name."""
        needed = [
            unit
            for unit in imports
            if unit.namespace not in (self._unit.namespace, IMPLICIT_NAMESPACE)
        ]
        return sorted(needed, key=lambda unit: unit.qualified_name)


def iso8601_timestamp() -> str:
    """Return the current local time as an ISO-8601 timestamp."""
    return datetime.now().isoformat()

