# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Synthesis of insert-row form fields from a table's column descriptors.

The widget for a column is chosen by the first matching entry of
:data:`WIDGET_RULES`, an ordered table of name-based heuristics. Columns
matching no rule get a plain text input.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

import structlog

from schemascope.introspect.resolver import lower_camel, resolve_type
from schemascope.model.fields import FieldKind, InsertField, ResolvedType

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############

IDENTITY_COLUMN = "id"

BOOLEAN_BASES = frozenset({"Boolean", "SqliteBoolean"})
BYTES_BASES = frozenset({"Uint8Array", "IdBytes"})


@dataclass(frozen=True)
class WidgetRule:
    """One entry of the widget selection table.

    Attributes:
        name: Short label identifying the rule.
        kind: Widget kind chosen when the rule matches.
        matches: Predicate over the resolved type and the reference table.
    """

    name: str
    kind: FieldKind
    matches: Callable[[ResolvedType, str | None], bool]


WIDGET_RULES: tuple[WidgetRule, ...] = (
    WidgetRule("literal-options", FieldKind.SELECT, lambda resolved, reference: bool(resolved.options)),
    WidgetRule("reference", FieldKind.SELECT, lambda resolved, reference: reference is not None),
    WidgetRule("boolean", FieldKind.CHECKBOX, lambda resolved, reference: resolved.base in BOOLEAN_BASES),
    WidgetRule("number", FieldKind.NUMBER, lambda resolved, reference: "Number" in resolved.base),
    WidgetRule("bytes", FieldKind.HEX, lambda resolved, reference: resolved.base in BYTES_BASES),
)


def choose_widget(resolved: ResolvedType, reference: str | None) -> FieldKind:
    """Return the widget kind of the first matching rule, or ``text``."""
    for rule in WIDGET_RULES:
        if rule.matches(resolved, reference):
            return rule.kind
    return FieldKind.TEXT


def reference_from_brand(brand: str | None) -> str | None:
    """Derive a referenced table name from an identifier brand.

    ``TodoCategoryId`` references ``todoCategory``. Brands without an
    ``Id`` suffix, or consisting only of it, reference nothing.
    """
    if not brand or not brand.endswith("Id"):
        return None
    stem = brand[: -len("Id")]
    return lower_camel(stem) or None


def derive_insert_field(name: str, descriptor: object) -> InsertField:
    """Build the form field specification for a single column."""
    resolved = resolve_type(descriptor)
    reference = resolved.reference or reference_from_brand(resolved.brand)
    return InsertField(
        name=name,
        type=choose_widget(resolved, reference),
        required=not resolved.nullable and not resolved.optional,
        options=list(resolved.options),
        reference_table=reference,
    )


def derive_insert_fields(
    columns: Mapping[str, object],
    identity_column: str = IDENTITY_COLUMN,
) -> list[InsertField]:
    """Synthesize the insert form for a table.

    Args:
        columns: Column names mapped to their type descriptors, in schema order.
        identity_column: Name of the generated identity column, which is
            never part of the form.

    Returns:
        One :class:`InsertField` per non-identity column, in schema order.
    """
    fields = [
        derive_insert_field(name, descriptor) for name, descriptor in columns.items() if name != identity_column
    ]
    logger.debug("insert_fields_derived", count=len(fields), identity_column=identity_column)
    return fields
