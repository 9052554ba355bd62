# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for byte sequence detection."""

import pytest

from schemascope.cells import is_binary_sequence, is_byte_sequence, is_native_bytes, to_bytes

# ###############
# Public Interface
# ###############


# -------- is_binary_sequence --------


def test_detects_index_keyed_byte_object() -> None:
    """A mapping of string indices to small integers is a byte sequence."""
    assert is_binary_sequence({"0": 164, "1": 222, "2": 157})


def test_detects_integer_keyed_byte_object() -> None:
    """Integer keys are accepted as well as their decimal string forms."""
    assert is_binary_sequence({0: 1, 1: 2})


def test_detects_list_of_small_integers() -> None:
    """Lists are index-keyed too, so a list of byte values is a byte sequence."""
    assert is_binary_sequence([1, 2, 255])


@pytest.mark.parametrize(
    "value",
    [
        {"a": 1},
        {"0": 256},
        {"0": -1},
        {"-1": 3},
        {"0": 1.5},
        {"0": True},
        {"0": "1"},
        {},
        [],
        None,
        "0102",
        7,
    ],
)
def test_rejects_non_binary_values(value: object) -> None:
    """Non-index keys, out-of-range or non-integer values, empties and scalars are rejected."""
    assert not is_binary_sequence(value)


def test_native_buffers_are_byte_sequences() -> None:
    """bytes, bytearray and memoryview are native byte buffers."""
    for value in (b"\x01", bytearray(b"\x01"), memoryview(b"\x01")):
        assert is_native_bytes(value)
        assert is_byte_sequence(value)
    assert not is_native_bytes({"0": 1})


# -------- to_bytes --------


def test_to_bytes_orders_object_entries_by_numeric_key() -> None:
    """Entries are ordered by numeric index, not insertion or lexical order."""
    value = {"0": 1, "2": 3, "1": 2, "10": 11, "3": 4}
    assert to_bytes(value) == bytes([1, 2, 3, 4, 11])


def test_to_bytes_of_native_buffer() -> None:
    assert to_bytes(bytearray([9, 8])) == b"\x09\x08"


def test_to_bytes_rejects_non_bytes() -> None:
    with pytest.raises(TypeError):
        to_bytes({"a": 1})
