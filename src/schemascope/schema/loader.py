# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of raw type descriptors and schema files into the descriptor model.

Raw descriptors are whatever the storage layer hands over: nested mappings
or attribute objects tagged by a ``name`` key (``Union``, ``Literal``,
``Brand``, ``Optional``, ``Id`` or a primitive name). They may reference
themselves; loading preserves such cycles in the typed graph.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

import structlog
import yaml

from schemascope.errors import SchemaFileError
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

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############

TableSchema = dict[str, TypeDescriptor]
DatabaseSchema = dict[str, TableSchema]


def load_descriptor(raw: object) -> TypeDescriptor:
    """Convert a raw descriptor object graph into typed descriptor nodes.

    Never raises: values that are not descriptor objects load as an empty
    :class:`OpaqueType`, and callables as an :class:`OpaqueType` carrying
    their name.
    """
    return _load(raw, {})


def load_table_schema(columns: Mapping[str, object]) -> TableSchema:
    """Load every column descriptor of a table, keeping column order.

    A bare string stands for a primitive type, so ``{"title": "String"}``
    is accepted as shorthand for ``{"title": {"name": "String"}}``.
    """
    memo: dict[int, TypeDescriptor] = {}
    return {
        str(column): _load({"name": raw} if isinstance(raw, str) else raw, memo) for column, raw in columns.items()
    }


def load_schema_file(path: Path) -> DatabaseSchema:
    """Read a ``{table: {column: descriptor}}`` schema from a YAML or JSON file.

    YAML anchors and aliases may be used to share or recursively reference
    descriptor nodes.

    Raises:
        SchemaFileError: If the file cannot be read or has the wrong shape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SchemaFileError(f"Schema file not found: {path}") from None
    except OSError as exc:
        raise SchemaFileError(f"Cannot read schema file: {exc}") from exc

    data = _parse_document(text, path)
    if not isinstance(data, Mapping):
        raise SchemaFileError(f"{path}: schema must be a mapping of table names to columns")

    schema: DatabaseSchema = {}
    for table, columns in data.items():
        if not isinstance(columns, Mapping):
            raise SchemaFileError(f"{path}: table '{table}' must be a mapping of column names to types")
        schema[str(table)] = load_table_schema(columns)

    logger.debug("schema_file_loaded", path=str(path), tables=len(schema))
    return schema


def read_data_file(path: Path) -> Any:
    """Read a YAML or JSON document, raising :class:`SchemaFileError` on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SchemaFileError(f"File not found: {path}") from None
    except OSError as exc:
        raise SchemaFileError(f"Cannot read file: {exc}") from exc
    return _parse_document(text, path)


# ################
# Implementation
# ################

_MISSING = object()


def _parse_document(text: str, path: Path) -> Any:
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaFileError(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaFileError(f"Invalid YAML in {path}: {exc}") from exc


def _attr(raw: object, key: str) -> Any:
    """Return a descriptor property from a mapping or attribute object."""
    if isinstance(raw, Mapping):
        return raw.get(key, _MISSING)
    return getattr(raw, key, _MISSING)


_Pending = tuple[object, Callable[[TypeDescriptor], None]]


def _load(raw: object, memo: dict[int, TypeDescriptor]) -> TypeDescriptor:
    """Load *raw* with a work stack instead of recursion.

    Each node is created and memoised before its children are queued, so a
    child that refers back to an ancestor picks up the existing node. Children
    are attached in order because their tasks are pushed in reverse.
    """
    loaded: list[TypeDescriptor] = []
    pending: list[_Pending] = [(raw, loaded.append)]
    while pending:
        item, attach = pending.pop()
        node, children = _load_node(item, memo)
        attach(node)
        pending.extend(reversed(children))
    return loaded[0]


def _load_node(raw: object, memo: dict[int, TypeDescriptor]) -> tuple[TypeDescriptor, list[_Pending]]:
    if is_descriptor(raw):
        return raw, []  # type: ignore[return-value]
    if raw is None or isinstance(raw, (str, bytes, bool, int, float)):
        return OpaqueType(), []
    if callable(raw):
        return OpaqueType(type_name=getattr(raw, "__name__", "") or "Function"), []

    key = id(raw)
    if key in memo:
        return memo[key], []

    tag = _attr(raw, "name")

    if tag == "Union":
        members = _attr(raw, "members")
        if isinstance(members, (list, tuple)):
            union = UnionType()
            memo[key] = union
            return union, [(member, union.members.append) for member in members]

    if tag == "Literal":
        expected = _attr(raw, "expected")
        if expected is not _MISSING:
            literal = LiteralType(expected=_as_scalar(expected))
            memo[key] = literal
            return literal, []

    if tag == "Brand":
        brand_name = _attr(raw, "brand")
        brand = BrandType(brand=brand_name if isinstance(brand_name, str) else None)
        memo[key] = brand
        parent = _attr(raw, "parentType")
        if parent is not _MISSING and parent is not None:
            return brand, [(parent, partial(setattr, brand, "parent"))]
        return brand, []

    if tag == "Optional":
        parent = _attr(raw, "parent")
        if parent is not _MISSING and parent is not None:
            optional = OptionalType.model_construct()
            memo[key] = optional
            return optional, [(parent, partial(setattr, optional, "parent"))]

    if tag == "Id":
        table = _attr(raw, "table")
        if isinstance(table, str) and table:
            return memo.setdefault(key, IdType(table=table)), []

    if isinstance(tag, str) and tag:
        return memo.setdefault(key, NamedType(name=tag)), []

    return memo.setdefault(key, _opaque(raw)), []


def _as_scalar(value: object) -> Any:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    return str(value)


def _opaque(raw: object) -> OpaqueType:
    """Describe an untagged object by its class name or its property names."""
    if isinstance(raw, Mapping):
        return OpaqueType(property_names=[str(name) for name in raw])
    if type(raw) is not object:
        return OpaqueType(type_name=type(raw).__name__)
    return OpaqueType(property_names=list(getattr(raw, "__dict__", {})))
