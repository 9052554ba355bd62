# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shorthand constructors mirroring the way table schemas are declared."""

from __future__ import annotations

from schemascope.model.descriptors import (
    BrandType,
    IdType,
    LiteralType,
    NamedType,
    OptionalType,
    ScalarValue,
    TypeDescriptor,
    UnionType,
)

# ###############
# Public Interface
# ###############

NULL = NamedType(name="Null")


def named(name: str) -> NamedType:
    """Return a primitive type node such as ``String`` or ``SqliteBoolean``."""
    return NamedType(name=name)


def literal(value: ScalarValue) -> LiteralType:
    return LiteralType(expected=value)


def union(*members: TypeDescriptor | ScalarValue) -> UnionType:
    """Build a union; bare scalar members are wrapped as literals.

    ``union("low", "high")`` is the enumeration of the two strings.
    """
    return UnionType(members=[_as_descriptor(member) for member in members])


def brand(name: str, parent: TypeDescriptor) -> BrandType:
    return BrandType(brand=name, parent=parent)


def optional(parent: TypeDescriptor) -> OptionalType:
    return OptionalType(parent=parent)


def null_or(parent: TypeDescriptor) -> UnionType:
    """Return the union of ``Null`` and *parent*."""
    return UnionType(members=[NULL, parent])


def id_of(table: str) -> IdType:
    """Return an identifier type referencing rows of *table*."""
    return IdType(table=table)


# ################
# Implementation
# ################


def _as_descriptor(member: TypeDescriptor | ScalarValue) -> TypeDescriptor:
    if member is None or isinstance(member, (str, bool, int, float)):
        return LiteralType(expected=member)
    return member
