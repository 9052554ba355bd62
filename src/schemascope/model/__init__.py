# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for column type descriptors and synthesized form fields."""

from schemascope.model.builders import NULL, brand, id_of, literal, named, null_or, optional, union
from schemascope.model.descriptors import (
    BrandType,
    IdType,
    LiteralType,
    NamedType,
    OpaqueType,
    OptionalType,
    ScalarValue,
    TypeDescriptor,
    UnionType,
    is_descriptor,
)
from schemascope.model.fields import FieldKind, InsertField, ResolvedType

__all__ = [
    # Descriptors
    "BrandType",
    "IdType",
    "LiteralType",
    "NamedType",
    "OpaqueType",
    "OptionalType",
    "ScalarValue",
    "TypeDescriptor",
    "UnionType",
    "is_descriptor",
    # Builders
    "NULL",
    "brand",
    "id_of",
    "literal",
    "named",
    "null_or",
    "optional",
    "union",
    # Derived
    "FieldKind",
    "InsertField",
    "ResolvedType",
]
