# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Load YAML blueprints and convert them into class declarations.

Loading happens in two steps. :func:`parse_blueprint` checks the document
against the pydantic schema, and :func:`build_classes` turns the validated
models into :class:`~declgen.codegen.classes.ClassDecl` objects. Every
failure, whether raised by the file system, the YAML parser, the schema, or
the declaration model, surfaces as a :class:`BlueprintError` whose message
starts with the location of the offending entry.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from declgen.blueprint.schema import (
    AnnotationSpec,
    Blueprint,
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ValueSpec,
)
from declgen.codegen.annotations import Annotation, marker, named_values, single_value
from declgen.codegen.classes import ClassDecl, ClassKind
from declgen.codegen.elements import Field, Parameter, Visibility
from declgen.model.errors import DeclarationError, InvalidArgumentError
from declgen.model.imports import ImportUnit
from declgen.model.types import parse_type
from declgen.model.values import Value, array_of, enum_value, literal

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class BlueprintError(Exception):
    """Raised when a blueprint cannot be read, validated, or converted."""


def load_blueprint(path: Path) -> Blueprint:
    """Read and validate a blueprint file.

    Args:
        path: Path to the YAML blueprint.

    Returns:
        The validated :class:`Blueprint` model.

    Raises:
        BlueprintError: If the file cannot be read or does not match the schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BlueprintError(f"Blueprint file not found: {path}") from None
    except OSError as exc:
        raise BlueprintError(f"Cannot read blueprint file: {exc}") from exc

    return parse_blueprint(text, source_label=str(path))


def parse_blueprint(text: str, source_label: str = "<string>") -> Blueprint:
    """Validate blueprint YAML text.

    An empty document is an empty blueprint.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages.

    Returns:
        The validated :class:`Blueprint` model.

    Raises:
        BlueprintError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise BlueprintError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise BlueprintError(f"{source_label}: blueprint must be a YAML mapping")

    try:
        return Blueprint.model_validate(data)
    except ValidationError as exc:
        raise BlueprintError(f"Invalid blueprint {source_label}: {exc}") from exc


def build_classes(blueprint: Blueprint, source_label: str = "<blueprint>") -> list[ClassDecl]:
    """Convert a validated blueprint into class declarations.

    Args:
        blueprint: The blueprint model.
        source_label: Human-readable label used in error messages.

    Returns:
        One :class:`ClassDecl` per blueprint class, in document order.

    Raises:
        BlueprintError: If a declaration is rejected by the model, for example
            because a value does not fit its type or a method body is missing.
    """
    classes: list[ClassDecl] = []
    seen: set[ImportUnit] = set()
    for index, spec in enumerate(blueprint.classes):
        location = f"{source_label}: classes[{index}] '{spec.name}'"
        class_decl = _build_class(spec, blueprint.package, location)
        if class_decl.unit in seen:
            raise BlueprintError(f"{location}: class {class_decl.unit} is declared more than once")
        seen.add(class_decl.unit)
        classes.append(class_decl)

    logger.info("Built %d class declaration(s) from %s", len(classes), source_label)
    return classes


# ################
# Implementation
# ################

_KINDS = {
    "class": ClassKind.CLASS,
    "abstract": ClassKind.ABSTRACT,
    "interface": ClassKind.INTERFACE,
}


def _build_class(spec: ClassSpec, package: str | None, location: str) -> ClassDecl:
    try:
        class_decl = ClassDecl(
            _class_unit(spec.name, package),
            kind=_KINDS[spec.kind],
            visibility=Visibility(spec.visibility),
        )
        for annotation in spec.annotations:
            class_decl.annotate(_build_annotation(annotation))
    except DeclarationError as exc:
        raise BlueprintError(f"{location}: {exc}") from exc

    for field_spec in spec.fields:
        try:
            class_decl.add_field(_build_field(field_spec, class_decl.kind))
        except DeclarationError as exc:
            raise BlueprintError(f"{location}: field '{field_spec.name}': {exc}") from exc

    for method_spec in spec.methods:
        try:
            _build_method(class_decl, method_spec)
        except DeclarationError as exc:
            raise BlueprintError(f"{location}: method '{method_spec.name}': {exc}") from exc

    return class_decl


def _class_unit(name: str, package: str | None) -> ImportUnit:
    """Resolve a class name against the blueprint package unless already qualified."""
    if "." in name:
        return ImportUnit.from_qualified_name(name)
    if not package:
        raise InvalidArgumentError(f"Class '{name}' is not qualified and the blueprint declares no package")
    return ImportUnit(package, name)


def _build_field(spec: FieldSpec, kind: ClassKind) -> Field:
    visibility = spec.visibility
    if visibility is None:
        visibility = "public" if kind is ClassKind.INTERFACE else "private"
    value = _build_value(spec.value) if spec.value is not None else None
    field = Field(
        parse_type(spec.type),
        spec.name,
        value,
        visibility=Visibility(visibility),
        static=spec.static,
        final=spec.final,
    )
    for annotation in spec.annotations:
        field.annotate(_build_annotation(annotation))
    return field


def _build_method(class_decl: ClassDecl, spec: MethodSpec) -> None:
    builder = class_decl.build_method(parse_type(spec.returns), spec.name)
    builder.set_visibility(Visibility(spec.visibility))
    for parameter_spec in spec.parameters:
        parameter = Parameter(parse_type(parameter_spec.type), parameter_spec.name)
        for annotation in parameter_spec.annotations:
            parameter.annotate(_build_annotation(annotation))
        builder.add_parameter(parameter)
    for annotation in spec.annotations:
        builder.add_annotation(_build_annotation(annotation))
    if spec.body is not None:
        builder.add_code(*spec.body)
    builder.build()


def _build_annotation(spec: AnnotationSpec) -> Annotation:
    if spec.values is not None:
        return named_values(spec.type, {name: _build_value(value) for name, value in spec.values.items()})
    if spec.value is not None:
        return single_value(spec.type, _build_value(spec.value))
    return marker(spec.type)


def _build_value(spec: ValueSpec) -> Value:
    value_type = parse_type(spec.type)
    if spec.items is not None:
        return array_of(value_type, *(_build_value(item) for item in spec.items))
    if spec.constant is not None:
        return enum_value(value_type, spec.constant)
    return literal(value_type, spec.value)
