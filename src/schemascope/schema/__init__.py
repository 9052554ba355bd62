# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of raw descriptors and schema files."""

from schemascope.schema.loader import (
    DatabaseSchema,
    TableSchema,
    load_descriptor,
    load_schema_file,
    load_table_schema,
    read_data_file,
)

__all__ = [
    "DatabaseSchema",
    "TableSchema",
    "load_descriptor",
    "load_schema_file",
    "load_table_schema",
    "read_data_file",
]
