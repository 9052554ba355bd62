# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between byte sequences and uppercase hexadecimal text."""

from __future__ import annotations

import re
from collections.abc import Iterable

from schemascope.errors import HexFormatError

# ###############
# Public Interface
# ###############

HEX_PREVIEW_BYTES = 10


def encode_hex(data: Iterable[int]) -> str:
    """Return the full ``0x``-prefixed uppercase hex form of *data*."""
    return "0x" + _hex_digits(bytes(data))


def encode_hex_preview(data: Iterable[int], limit: int = HEX_PREVIEW_BYTES) -> str:
    """Render a display preview such as ``0xA4DE9D (3 B)``.

    Only the first *limit* bytes are shown; the trailing count is always the
    length of the whole sequence.
    """
    raw = bytes(data)
    return f"0x{_hex_digits(raw[:limit])} ({len(raw)} B)"


def decode_hex(text: str) -> bytes:
    """Decode hexadecimal text into bytes.

    Whitespace anywhere in *text* and a leading ``0x``/``0X`` marker are
    ignored. An empty remainder decodes to ``b""``.

    Raises:
        HexFormatError: If the digit count is odd or a pair is not hexadecimal.
    """
    digits = _WHITESPACE.sub("", text)
    if digits[:2] in ("0x", "0X"):
        digits = digits[2:]
    if not digits:
        return b""
    if len(digits) % 2 != 0:
        raise HexFormatError("odd-length hex")

    decoded = bytearray()
    for offset in range(0, len(digits), 2):
        pair = digits[offset : offset + 2]
        if not _HEX_PAIR.fullmatch(pair):
            raise HexFormatError(f"invalid hex digit in {pair!r} at offset {offset}")
        decoded.append(int(pair, 16))
    return bytes(decoded)


# ################
# Implementation
# ################

_WHITESPACE = re.compile(r"\s+")
_HEX_PAIR = re.compile(r"[0-9A-Fa-f]{2}")


def _hex_digits(raw: bytes) -> str:
    return "".join(f"{byte:02X}" for byte in raw)
