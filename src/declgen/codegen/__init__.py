# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering pipeline: emitter, annotations, declaration elements, and classes."""

from declgen.codegen.annotations import (
    Annotation,
    AnnotationShape,
    marker,
    named_values,
    single_value,
)
from declgen.codegen.classes import (
    GENERATED_ANNOTATION,
    ClassDecl,
    ClassKind,
    iso8601_timestamp,
)
from declgen.codegen.elements import Element, Field, NamedElement, Parameter, Visibility
from declgen.codegen.emitter import INDENT_WIDTH, CodeEmitter
from declgen.codegen.methods import (
    AbstractMethodBuilder,
    ClassMethod,
    ConcreteMethodBuilder,
    InterfaceMethod,
    InterfaceMethodBuilder,
    Method,
    MethodBuilder,
)

__all__ = [
    # Emitter
    "CodeEmitter",
    "INDENT_WIDTH",
    # Annotations
    "Annotation",
    "AnnotationShape",
    "marker",
    "single_value",
    "named_values",
    # Elements
    "Element",
    "NamedElement",
    "Parameter",
    "Field",
    "Visibility",
    # Methods
    "Method",
    "ClassMethod",
    "InterfaceMethod",
    "MethodBuilder",
    "ConcreteMethodBuilder",
    "AbstractMethodBuilder",
    "InterfaceMethodBuilder",
    # Classes
    "ClassDecl",
    "ClassKind",
    "GENERATED_ANNOTATION",
    "iso8601_timestamp",
]
