# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML blueprints: schema, conversion into class declarations, and output."""

from declgen.blueprint.loader import BlueprintError, build_classes, load_blueprint, parse_blueprint
from declgen.blueprint.output import SOURCE_SUFFIX, source_path, write_sources
from declgen.blueprint.schema import (
    AnnotationSpec,
    Blueprint,
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ParameterSpec,
    ValueSpec,
)

__all__ = [
    # Schema
    "Blueprint",
    "ClassSpec",
    "FieldSpec",
    "MethodSpec",
    "ParameterSpec",
    "AnnotationSpec",
    "ValueSpec",
    # Loading
    "BlueprintError",
    "load_blueprint",
    "parse_blueprint",
    "build_classes",
    # Output
    "SOURCE_SUFFIX",
    "source_path",
    "write_sources",
]
