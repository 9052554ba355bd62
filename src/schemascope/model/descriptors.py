# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor representations for table columns.

A column's declared type is a graph of descriptor nodes. Container nodes
(unions, brands, optionals) may point back at their ancestors, so the graph
can be cyclic; code walking it must compare nodes by identity.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

ScalarValue = str | bool | int | float | None


class NamedType(BaseModel):
    """A primitive or otherwise opaque type identified only by its name tag."""

    kind: Literal["named"] = "named"
    name: str


class LiteralType(BaseModel):
    """A type admitting exactly one concrete value."""

    kind: Literal["literal"] = "literal"
    expected: ScalarValue = None


class UnionType(BaseModel):
    """An ordered union of member types."""

    kind: Literal["union"] = "union"
    members: list[TypeDescriptor] = _Field(default_factory=list)


class BrandType(BaseModel):
    """A named wrapper distinguishing values that share a representation."""

    kind: Literal["brand"] = "brand"
    brand: str | None = None
    parent: TypeDescriptor | None = None


class OptionalType(BaseModel):
    """A column that may be left out of an inserted row."""

    kind: Literal["optional"] = "optional"
    parent: TypeDescriptor


class IdType(BaseModel):
    """An identifier referencing a row of another table."""

    kind: Literal["id"] = "id"
    table: str


class OpaqueType(BaseModel):
    """A descriptor object exposing no usable kind tag."""

    kind: Literal["opaque"] = "opaque"
    type_name: str | None = None
    property_names: list[str] = _Field(default_factory=list)


# A column type descriptor: one node of the (possibly cyclic) type graph.
TypeDescriptor = Annotated[
    NamedType | LiteralType | UnionType | BrandType | OptionalType | IdType | OpaqueType,
    _Field(discriminator="kind"),
]

_DESCRIPTOR_CLASSES = (NamedType, LiteralType, UnionType, BrandType, OptionalType, IdType, OpaqueType)


def is_descriptor(value: object) -> bool:
    """Return True if *value* is already a typed descriptor node."""
    return isinstance(value, _DESCRIPTOR_CLASSES)


# Resolve forward references for models that use TypeDescriptor.
UnionType.model_rebuild()
BrandType.model_rebuild()
OptionalType.model_rebuild()
