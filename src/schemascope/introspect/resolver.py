# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flattening of type descriptor graphs into resolved type summaries.

The resolver walks a descriptor graph depth-first and folds it into a
:class:`ResolvedType`. Nodes are tracked by identity: a node shared by
several parents is resolved once per call, and a node reached again through
its own descendants resolves to ``Unknown``. The walk keeps its own stack, so
deep chains are not bounded by the interpreter recursion limit.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from schemascope.cells.values import format_scalar
from schemascope.model.descriptors import (
    BrandType,
    IdType,
    LiteralType,
    NamedType,
    OptionalType,
    TypeDescriptor,
    UnionType,
    is_descriptor,
)
from schemascope.model.fields import ResolvedType
from schemascope.schema.loader import load_descriptor

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############


def resolve_type(descriptor: object) -> ResolvedType:
    """Resolve a column's type descriptor into a flat summary.

    Args:
        descriptor: A typed descriptor node, or a raw descriptor object
            (mapping or attribute object) which is loaded first.

    Returns:
        The :class:`ResolvedType` summary. Malformed or unrecognised
        descriptors resolve to base kind ``Unknown`` instead of raising.
    """
    node = descriptor if is_descriptor(descriptor) else load_descriptor(descriptor)
    return _resolve_graph(node)  # type: ignore[arg-type]


def lower_camel(name: str) -> str:
    """Lowercase the first character of *name*, leaving the rest unchanged."""
    return name[:1].lower() + name[1:]


# ################
# Implementation
# ################

_UNKNOWN = ResolvedType()


def _resolve_graph(root: TypeDescriptor) -> ResolvedType:
    """Resolve *root* with an explicit stack, post-order.

    ``resolved`` holds finished nodes so shared subgraphs are folded once per
    call; ``active`` holds the nodes on the current path, and a child found
    there is a back edge that resolves to ``Unknown``.
    """
    resolved: dict[int, ResolvedType] = {}
    active: set[int] = set()
    stack: list[tuple[TypeDescriptor, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        key = id(node)
        if expanded:
            active.discard(key)
            resolved[key] = _resolve_node(node, [_lookup(child, resolved) for child in _children(node)])
            continue
        if key in resolved or key in active:
            continue

        active.add(key)
        stack.append((node, True))
        for child in reversed(_children(node)):
            child_key = id(child)
            if child_key in active:
                logger.debug("descriptor_cycle_detected", kind=child.kind)
            elif child_key not in resolved:
                stack.append((child, False))

    return resolved[id(root)]


def _lookup(child: TypeDescriptor, resolved: dict[int, ResolvedType]) -> ResolvedType:
    return resolved.get(id(child), _UNKNOWN)


def _children(node: TypeDescriptor) -> list[TypeDescriptor]:
    if isinstance(node, OptionalType):
        return [node.parent]
    if isinstance(node, BrandType):
        return [] if node.parent is None else [node.parent]
    if isinstance(node, UnionType):
        return list(node.members)
    return []


def _resolve_node(node: TypeDescriptor, children: list[ResolvedType]) -> ResolvedType:
    if isinstance(node, OptionalType):
        return replace(children[0], optional=True)

    if isinstance(node, BrandType):
        if not children:
            return ResolvedType(base="Brand")
        parent = children[0]
        return replace(parent, brand=node.brand or parent.brand)

    if isinstance(node, IdType):
        return ResolvedType(base="Id", reference=lower_camel(node.table) or None)

    if isinstance(node, LiteralType):
        return _resolve_literal(node)

    if isinstance(node, UnionType):
        return _resolve_union(children)

    if isinstance(node, NamedType) and node.name:
        return ResolvedType(base=node.name, nullable=node.name == "Null")

    return _UNKNOWN


def _resolve_literal(node: LiteralType) -> ResolvedType:
    expected = node.expected
    if expected is None:
        return ResolvedType(base="Null", nullable=True)
    return ResolvedType(base=_literal_base(expected), options=(format_scalar(expected),))


def _literal_base(expected: object) -> str:
    if isinstance(expected, str):
        return "String"
    if isinstance(expected, bool):
        return "Boolean"
    return "Number"


def _resolve_union(members: list[ResolvedType]) -> ResolvedType:
    """Merge member summaries.

    Null members only contribute nullability; the remaining base kinds vote,
    and a union whose non-null members disagree keeps the base ``Union``.
    """
    bases: dict[str, None] = {}
    options: dict[str, None] = {}
    brands: dict[str, None] = {}
    references: dict[str, None] = {}
    nullable = False
    optional = False

    for resolved in members:
        optional = optional or resolved.optional
        options.update(dict.fromkeys(resolved.options))
        if resolved.brand:
            brands.setdefault(resolved.brand, None)
        if resolved.reference:
            references.setdefault(resolved.reference, None)
        if resolved.nullable or resolved.base == "Null":
            nullable = True
            continue
        bases.setdefault(resolved.base, None)

    return ResolvedType(
        base=next(iter(bases)) if len(bases) == 1 else "Union",
        nullable=nullable,
        optional=optional,
        options=tuple(options),
        brand=next(iter(brands), None),
        reference=next(iter(references), None),
    )
