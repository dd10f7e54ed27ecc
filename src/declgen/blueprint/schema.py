# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema of the YAML blueprint files describing declarations to generate.

A blueprint lists classes with their annotations, fields, and methods. Types
are written as text: ``"int"``, ``"void"``, or a fully qualified name such as
``"com.example.Widget"``. Values carry their type explicitly::

    {type: int, value: 3}
    {type: com.example.Color, constant: RED}
    {type: com.example.Color, items: [{type: com.example.Color, constant: RED}]}
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ###############
# Public Interface
# ###############

VisibilityName = Literal["public", "protected", "private", "package"]


class ValueSpec(BaseModel):
    """A typed value: exactly one of ``value``, ``constant``, or ``items``."""

    model_config = ConfigDict(extra="forbid")

    type: str
    value: bool | int | float | str | None = None
    constant: str | None = None
    items: list[ValueSpec] | None = None

    @model_validator(mode="after")
    def check_single_payload(self) -> ValueSpec:
        given = [name for name in ("value", "constant", "items") if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError("a value needs exactly one of 'value', 'constant', or 'items'")
        return self


class AnnotationSpec(BaseModel):
    """An applied annotation: a marker, a single ``value``, or named ``values``."""

    model_config = ConfigDict(extra="forbid")

    type: str
    value: ValueSpec | None = None
    values: dict[str, ValueSpec] | None = None

    @model_validator(mode="after")
    def check_shape(self) -> AnnotationSpec:
        if self.value is not None and self.values is not None:
            raise ValueError("an annotation takes either 'value' or 'values', not both")
        return self


class ParameterSpec(BaseModel):
    """A method parameter."""

    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    annotations: list[AnnotationSpec] = Field(default_factory=list)


class FieldSpec(BaseModel):
    """A field declaration. Visibility defaults to public in interfaces and private elsewhere."""

    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    visibility: VisibilityName | None = None
    static: bool = False
    final: bool = False
    value: ValueSpec | None = None
    annotations: list[AnnotationSpec] = Field(default_factory=list)


class MethodSpec(BaseModel):
    """A method declaration. Omitting ``body`` declares it without an implementation."""

    model_config = ConfigDict(extra="forbid")

    name: str
    returns: str = "void"
    visibility: VisibilityName = "public"
    parameters: list[ParameterSpec] = Field(default_factory=list)
    annotations: list[AnnotationSpec] = Field(default_factory=list)
    body: list[str] | None = None


class ClassSpec(BaseModel):
    """A top-level class, abstract class, or interface."""

    model_config = ConfigDict(extra="forbid")

    name: str
    kind: Literal["class", "abstract", "interface"] = "class"
    visibility: VisibilityName = "public"
    annotations: list[AnnotationSpec] = Field(default_factory=list)
    fields: list[FieldSpec] = Field(default_factory=list)
    methods: list[MethodSpec] = Field(default_factory=list)


class Blueprint(BaseModel):
    """Top-level blueprint model.

    Attributes:
        package: Namespace for classes whose ``name`` is not fully qualified.
        classes: Class declarations to generate.
    """

    model_config = ConfigDict(extra="forbid")

    package: str | None = None
    classes: list[ClassSpec] = Field(default_factory=list)


# Resolve forward references in self-referential models.
ValueSpec.model_rebuild()
