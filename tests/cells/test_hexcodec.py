# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the hex codec."""

import pytest

from schemascope.cells import decode_hex, encode_hex, encode_hex_preview
from schemascope.errors import HexFormatError

# ###############
# Public Interface
# ###############


# -------- encode --------


def test_preview_is_uppercase_and_zero_padded() -> None:
    assert encode_hex_preview(bytes([1, 2, 3, 4])) == "0x01020304 (4 B)"
    assert encode_hex_preview(bytes([0xA4, 0x0F])) == "0xA40F (2 B)"


def test_preview_truncates_digits_but_reports_full_length() -> None:
    """Only ten bytes are shown; the byte count covers the whole sequence."""
    data = bytes([164, 222, 157, 79, 249, 170, 197, 155, 84, 108, 138])
    assert encode_hex_preview(data) == "0xA4DE9D4FF9AAC59B546C (11 B)"


def test_preview_of_empty_sequence() -> None:
    assert encode_hex_preview(b"") == "0x (0 B)"


def test_encode_accepts_integer_lists() -> None:
    assert encode_hex([0, 255]) == "0x00FF"


def test_full_encoding_round_trips() -> None:
    """decode_hex inverts encode_hex for a sequence longer than the preview cap."""
    data = bytes(range(0, 256, 7))
    assert decode_hex(encode_hex(data)) == data


# -------- decode --------


def test_decode_plain_hex() -> None:
    assert decode_hex("A4DE") == bytes([0xA4, 0xDE])


def test_decode_strips_prefix_and_whitespace() -> None:
    assert decode_hex("  0xa4 de\n9d ") == bytes([0xA4, 0xDE, 0x9D])
    assert decode_hex("0XFF") == b"\xff"


def test_decode_empty_text_gives_empty_bytes() -> None:
    assert decode_hex("") == b""
    assert decode_hex("0x") == b""
    assert decode_hex("   ") == b""


def test_decode_odd_length_fails() -> None:
    with pytest.raises(HexFormatError, match="odd-length hex"):
        decode_hex("414")


def test_decode_invalid_digit_fails() -> None:
    with pytest.raises(HexFormatError, match="invalid hex digit"):
        decode_hex("A4ZZ")


def test_decode_error_is_a_value_error() -> None:
    """Callers catching ValueError also see hex format errors."""
    with pytest.raises(ValueError):
        decode_hex("G0")
