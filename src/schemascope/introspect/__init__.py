# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor introspection and insert-form synthesis."""

from schemascope.introspect.fields import (
    IDENTITY_COLUMN,
    WIDGET_RULES,
    WidgetRule,
    choose_widget,
    derive_insert_field,
    derive_insert_fields,
    reference_from_brand,
)
from schemascope.introspect.formatter import RECURSIVE_MARKER, format_schema_type
from schemascope.introspect.resolver import lower_camel, resolve_type
from schemascope.introspect.values import InsertValue, is_numeric_text, parse_insert_row, parse_insert_value

__all__ = [
    "IDENTITY_COLUMN",
    "InsertValue",
    "RECURSIVE_MARKER",
    "WIDGET_RULES",
    "WidgetRule",
    "choose_widget",
    "derive_insert_field",
    "derive_insert_fields",
    "format_schema_type",
    "is_numeric_text",
    "lower_camel",
    "parse_insert_row",
    "parse_insert_value",
    "reference_from_brand",
    "resolve_type",
]
