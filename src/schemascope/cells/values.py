# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime classification and display of loosely typed cell values."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any

from schemascope.cells.binary import is_byte_sequence, to_bytes
from schemascope.cells.hexcodec import encode_hex_preview

# ###############
# Public Interface
# ###############

Row = Mapping[str, Any]


class _Undefined:
    """Marker for a value that is absent rather than null."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class ValueKind(Enum):
    """Semantic kinds a runtime cell value can take."""

    NULL = "null"
    UNDEFINED = "undefined"
    BYTES = "bytes"
    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


def classify_value(value: object) -> ValueKind:
    """Return the semantic kind of *value*. Every input maps to exactly one kind."""
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if is_byte_sequence(value):
        return ValueKind.BYTES
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OBJECT


def format_scalar(value: object) -> str:
    """Return the display string of a non-container value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_cell(value: object) -> str:
    """Render any cell value as a stable, human-readable string.

    Byte sequences render as a hex preview regardless of whether they are
    native buffers or index-keyed objects; other containers render as
    compact JSON in insertion order.
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return ""
    if is_byte_sequence(value):
        return encode_hex_preview(to_bytes(value))
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return _dump_json(value)
        except TypeError:
            return _dump_json(_with_string_keys(value))
        except ValueError:
            # circular container
            return str(value)
    return format_scalar(value)


def infer_column_type(rows: Sequence[Row], column: str) -> str:
    """Describe the runtime type of *column* across *rows*.

    Rows that lack the column entirely are skipped. Returns ``"no data"``
    when no row has the column, the single observed kind when there is one,
    and ``mixed(a|b)`` in first-seen order otherwise.
    """
    seen: dict[ValueKind, None] = {}
    for row in rows:
        if column not in row:
            continue
        seen.setdefault(classify_value(row[column]), None)

    if not seen:
        return "no data"
    kinds = [kind.value for kind in seen]
    if len(kinds) == 1:
        return kinds[0]
    return f"mixed({'|'.join(kinds)})"


# ################
# Implementation
# ################


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {str(index): byte for index, byte in enumerate(bytes(value))}
    if value is UNDEFINED:
        return None
    return str(value)


def _dump_json(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


_JSON_KEY_TYPES = (str, int, float, bool)


def _with_string_keys(value: Any) -> Any:
    """Copy *value* with mapping keys JSON cannot encode turned into display strings."""
    if isinstance(value, Mapping):
        return {
            key if key is None or isinstance(key, _JSON_KEY_TYPES) else format_scalar(key): _with_string_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_with_string_keys(item) for item in value]
    return value
