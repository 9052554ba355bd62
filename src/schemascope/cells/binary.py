# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Detection of byte sequences in their native and serialized forms.

Byte columns reach the inspector either as native buffers or, after a trip
through a JSON-like serializer, as index-keyed objects such as
``{"0": 164, "1": 222}``. Both forms denote the same bytes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# ###############
# Public Interface
# ###############


def is_native_bytes(value: object) -> bool:
    """Return True if *value* is a native byte buffer."""
    return isinstance(value, (bytes, bytearray, memoryview))


def is_binary_sequence(value: object) -> bool:
    """Return True if *value* is an index-keyed collection of byte values.

    Every key must parse as a non-negative integer and every value must be
    an integer in ``[0, 255]``. Empty collections are rejected because they
    are indistinguishable from an empty record.
    """
    entries = _index_entries(value)
    if not entries:
        return False
    return all(_parse_index(key) is not None and _is_byte(item) for key, item in entries)


def is_byte_sequence(value: object) -> bool:
    """Return True if *value* is a byte sequence in either representation."""
    return is_native_bytes(value) or is_binary_sequence(value)


def to_bytes(value: object) -> bytes:
    """Return the bytes held by a native buffer or an index-keyed collection.

    Index-keyed entries are ordered by ascending numeric key.

    Raises:
        TypeError: If *value* is not a byte sequence.
    """
    if is_native_bytes(value):
        return bytes(value)  # type: ignore[arg-type]
    if not is_binary_sequence(value):
        raise TypeError(f"Not a byte sequence: {type(value).__name__}")
    entries = sorted(_index_entries(value), key=lambda entry: _parse_index(entry[0]) or 0)
    return bytes(item for _, item in entries)


# ################
# Implementation
# ################


def _index_entries(value: object) -> list[tuple[Any, Any]]:
    """Return the (key, value) entries of a mapping, list or tuple."""
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (list, tuple)):
        return list(enumerate(value))
    return []


def _parse_index(key: object) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None


def _is_byte(item: object) -> bool:
    return isinstance(item, int) and not isinstance(item, bool) and 0 <= item <= 255
