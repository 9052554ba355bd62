# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of type descriptors as readable type signatures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from schemascope.cells.values import format_scalar
from schemascope.model.descriptors import (
    BrandType,
    IdType,
    LiteralType,
    NamedType,
    OpaqueType,
    OptionalType,
    TypeDescriptor,
    UnionType,
    is_descriptor,
)
from schemascope.schema.loader import load_descriptor

# ###############
# Public Interface
# ###############

RECURSIVE_MARKER = "[Recursive]"
MAX_LISTED_PROPERTIES = 6


def format_schema_type(descriptor: object) -> str:
    """Render a descriptor as a signature such as ``"low" | "high"``.

    Each node is rendered once per call; a node reached a second time,
    whether through its own descendants or as a shared member, renders as
    ``[Recursive]``.

    Examples::

        ExampleId<String>
        String (optional)
        Null | Uint8Array
    """
    node = descriptor if is_descriptor(descriptor) else load_descriptor(descriptor)
    return _format_graph(node)  # type: ignore[arg-type]


# ################
# Implementation
# ################


@dataclass
class _Frame:
    node: TypeDescriptor
    children: list[TypeDescriptor]
    parts: list[str] = field(default_factory=list)


def _format_graph(root: TypeDescriptor) -> str:
    """Render *root* depth-first, left to right, with an explicit stack.

    Every node is recorded in ``seen`` the first time it is reached and stays
    there for the rest of the call, so any later visit renders the marker.
    """
    seen: set[int] = set()
    stack: list[_Frame] = []

    def visit(node: TypeDescriptor) -> str | None:
        key = id(node)
        if key in seen:
            return RECURSIVE_MARKER
        seen.add(key)
        children = _children(node)
        if not children:
            return _format_node(node, [])
        stack.append(_Frame(node, children))
        return None

    text = visit(root)
    while stack:
        frame = stack[-1]
        if len(frame.parts) < len(frame.children):
            text = visit(frame.children[len(frame.parts)])
            if text is not None:
                frame.parts.append(text)
            continue

        stack.pop()
        text = _format_node(frame.node, frame.parts)
        if stack:
            stack[-1].parts.append(text)

    return text or ""


def _children(node: TypeDescriptor) -> list[TypeDescriptor]:
    if isinstance(node, UnionType):
        return list(node.members)
    if isinstance(node, BrandType):
        return [] if node.brand is None or node.parent is None else [node.parent]
    if isinstance(node, OptionalType):
        return [node.parent]
    return []


def _format_node(node: TypeDescriptor, parts: list[str]) -> str:
    if isinstance(node, UnionType):
        return " | ".join(parts)

    if isinstance(node, LiteralType):
        if isinstance(node.expected, str):
            return json.dumps(node.expected, ensure_ascii=False)
        return format_scalar(node.expected)

    if isinstance(node, BrandType):
        if node.brand is None:
            return "Brand"
        if not parts:
            return node.brand
        return f"{node.brand}<{parts[0]}>"

    if isinstance(node, OptionalType):
        return f"{parts[0]} (optional)"

    if isinstance(node, IdType):
        return "Id"

    if isinstance(node, NamedType) and node.name:
        return node.name

    if isinstance(node, OpaqueType):
        if node.type_name:
            return node.type_name
        if node.property_names:
            return f"Object({', '.join(node.property_names[:MAX_LISTED_PROPERTIES])})"

    return "Unknown"
