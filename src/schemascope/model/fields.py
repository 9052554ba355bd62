# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Derived, per-call summaries of column types and insert form fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class FieldKind(Enum):
    """Input widget kinds used by a synthesized insert form."""

    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    HEX = "hex"
    SELECT = "select"


@dataclass(frozen=True)
class ResolvedType:
    """Flattened digest of a type descriptor.

    Attributes:
        base: Base kind name, e.g. ``String``, ``Uint8Array`` or ``Union``.
        nullable: Whether ``null`` is an admitted value.
        optional: Whether the column may be omitted entirely.
        options: Literal values admitted by the type, stringified.
        brand: Brand name of the innermost brand, if any.
        reference: Table referenced by an identifier type, if any.
    """

    base: str = "Unknown"
    nullable: bool = False
    optional: bool = False
    options: tuple[str, ...] = ()
    brand: str | None = None
    reference: str | None = None


class InsertField(BaseModel):
    """Specification of one input of an insert-row form."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldKind
    required: bool
    options: list[str] = _Field(default_factory=list)
    reference_table: str | None = None
