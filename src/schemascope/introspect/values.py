# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of raw form input into typed values ready for insertion."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from schemascope.cells.hexcodec import decode_hex
from schemascope.cells.values import format_scalar
from schemascope.errors import FieldTypeError, RequiredFieldError
from schemascope.model.fields import FieldKind, InsertField

# ###############
# Public Interface
# ###############

RawInput = str | bool
InsertValue = str | int | float | bytes | None


def parse_insert_value(field: InsertField, raw: RawInput) -> InsertValue:
    """Parse one raw form input according to its field specification.

    Checkbox inputs always yield ``1`` or ``0``. For every other kind the
    input is trimmed first; an empty optional input yields ``None``.

    Raises:
        RequiredFieldError: If a required field is left empty.
        FieldTypeError: If a number field receives non-numeric text.
        HexFormatError: If a hex field receives malformed hex text.
    """
    if field.type is FieldKind.CHECKBOX:
        return 1 if _is_checked(raw) else 0

    text = (raw if isinstance(raw, str) else format_scalar(raw)).strip()
    if not text:
        if field.required:
            raise RequiredFieldError(field.name)
        return None

    if field.type is FieldKind.NUMBER:
        if not is_numeric_text(text):
            raise FieldTypeError(field.name, f"expected a number, got {text!r}")
        return _to_number(text)

    if field.type is FieldKind.HEX:
        return decode_hex(text)

    if (
        field.type is FieldKind.SELECT
        and field.reference_table is None
        and all(is_numeric_text(option) for option in field.options)
        and is_numeric_text(text)
    ):
        return _to_number(text)

    return text


def parse_insert_row(fields: Iterable[InsertField], raw_values: Mapping[str, RawInput]) -> dict[str, Any]:
    """Parse a whole form submission into a row keyed by field name.

    Fields missing from *raw_values* are treated as left empty (unchecked
    for checkboxes). The first invalid field aborts parsing.
    """
    row: dict[str, Any] = {}
    for field in fields:
        default: RawInput = False if field.type is FieldKind.CHECKBOX else ""
        row[field.name] = parse_insert_value(field, raw_values.get(field.name, default))
    return row


def is_numeric_text(text: str) -> bool:
    """Return True if *text* reads as a decimal number, e.g. ``-1.5`` or ``2e3``."""
    return _NUMBER.fullmatch(text.strip()) is not None


# ################
# Implementation
# ################

_NUMBER = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")
_INTEGER = re.compile(r"[-+]?\d+")
_CHECKED_TEXT = frozenset({"1", "true", "on", "yes"})


def _to_number(text: str) -> int | float:
    text = text.strip()
    if _INTEGER.fullmatch(text):
        return int(text)
    return float(text)


def _is_checked(raw: RawInput) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in _CHECKED_TEXT
    return bool(raw)
