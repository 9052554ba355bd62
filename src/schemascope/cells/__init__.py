# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification and display of runtime cell values, including byte columns."""

from schemascope.cells.binary import is_binary_sequence, is_byte_sequence, is_native_bytes, to_bytes
from schemascope.cells.hexcodec import HEX_PREVIEW_BYTES, decode_hex, encode_hex, encode_hex_preview
from schemascope.cells.values import (
    UNDEFINED,
    Row,
    ValueKind,
    classify_value,
    format_cell,
    format_scalar,
    infer_column_type,
)

__all__ = [
    "HEX_PREVIEW_BYTES",
    "Row",
    "UNDEFINED",
    "ValueKind",
    "classify_value",
    "decode_hex",
    "encode_hex",
    "encode_hex_preview",
    "format_cell",
    "format_scalar",
    "infer_column_type",
    "is_binary_sequence",
    "is_byte_sequence",
    "is_native_bytes",
    "to_bytes",
]
