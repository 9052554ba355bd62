# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the schemascope core."""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class SchemascopeError(Exception):
    """Base class for all errors raised by schemascope."""


class HexFormatError(SchemascopeError, ValueError):
    """Raised when hexadecimal text cannot be decoded into bytes."""


class RequiredFieldError(SchemascopeError):
    """Raised when a required insert field is left empty.

    Attributes:
        field_name: Name of the offending field.
    """

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Field '{field_name}' is required")
        self.field_name = field_name


class FieldTypeError(SchemascopeError, TypeError):
    """Raised when an insert field value does not match the field's kind.

    Attributes:
        field_name: Name of the offending field.
    """

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"Field '{field_name}': {message}")
        self.field_name = field_name


class SchemaFileError(SchemascopeError):
    """Raised when a schema file cannot be read or parsed."""
