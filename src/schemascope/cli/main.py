# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the schemascope command-line interface."""

import argparse
import json
import sys
from collections.abc import Mapping
from pathlib import Path

import structlog

from schemascope.cells.values import format_cell, infer_column_type
from schemascope.errors import SchemascopeError
from schemascope.introspect.fields import derive_insert_fields
from schemascope.introspect.formatter import format_schema_type
from schemascope.introspect.values import parse_insert_row
from schemascope.log import LOG_LEVELS, configure_logging
from schemascope.schema.loader import DatabaseSchema, TableSchema, load_schema_file, read_data_file
from schemascope.tables.listing import (
    describe_columns,
    filter_rows_by_search,
    paginate_rows,
    sort_tables,
    split_tables,
)
from schemascope.workspace.config import InspectorConfig, find_inspector_config, load_inspector_config

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the schemascope CLI."""
    parser = argparse.ArgumentParser(
        prog="schemascope",
        description="schemascope: inspect table schemas and synthesize insert forms",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the inspector config file (default: ./.schemascope.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Minimum level of log events written to stderr (default: from config)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # types subcommand
    types_parser = subparsers.add_parser(
        "types",
        help="Print the declared type signature of every column",
        description="Render each column's type descriptor as a readable type signature.",
    )
    types_parser.add_argument("schema", type=Path, help="Schema file (YAML or JSON)")
    types_parser.add_argument("--table", default=None, help="Only show this table")

    # fields subcommand
    fields_parser = subparsers.add_parser(
        "fields",
        help="Print the insert form synthesized for a table",
        description="Derive the insert-row form fields of a table from its column types.",
    )
    fields_parser.add_argument("schema", type=Path, help="Schema file (YAML or JSON)")
    fields_parser.add_argument("table", help="Table to build the form for")
    fields_parser.add_argument("--json", action="store_true", help="Emit the fields as JSON")

    # rows subcommand
    rows_parser = subparsers.add_parser(
        "rows",
        help="Print loaded rows with inferred column types",
        description="Format the rows of a JSON or YAML row file and infer each column's runtime type.",
    )
    rows_parser.add_argument("rows", type=Path, help="Row file holding a list of row mappings")
    rows_parser.add_argument("--columns", default=None, help="Comma-separated columns to show (default: all)")
    rows_parser.add_argument("--search", default="", help="Only show rows whose visible cells contain this text")
    rows_parser.add_argument("--page", type=int, default=1, help="1-based page number (default: 1)")
    rows_parser.add_argument("--schema", type=Path, default=None, help="Schema file used to show declared types")
    rows_parser.add_argument("--table", default=None, help="Table of the schema file the rows belong to")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse form input into a typed row",
        description="Convert NAME=VALUE form inputs into the typed values stored for a new row.",
    )
    parse_parser.add_argument("schema", type=Path, help="Schema file (YAML or JSON)")
    parse_parser.add_argument("table", help="Table the row is inserted into")
    parse_parser.add_argument("values", nargs="*", metavar="NAME=VALUE", help="Raw form inputs")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Load configuration, then dispatch to the appropriate subcommand handler."""
    try:
        config = load_inspector_config(args.config) if args.config else find_inspector_config(Path.cwd())
        configure_logging(args.log_level or config.log_level)
        logger.debug("command_started", command=args.command)

        if args.command == "types":
            return _cmd_types(args, config)
        if args.command == "fields":
            return _cmd_fields(args, config)
        if args.command == "rows":
            return _cmd_rows(args, config)
        if args.command == "parse":
            return _cmd_parse(args, config)
    except SchemascopeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_types(args: argparse.Namespace, config: InspectorConfig) -> int:
    """Handle the types subcommand."""
    schema = load_schema_file(args.schema)
    if args.table is not None:
        tables = [_require_table(schema, args.table)]
    else:
        groups = split_tables(sort_tables(schema), config.internal_table_prefix)
        tables = groups.regular + groups.internal

    for table in tables:
        print(f"{table}:")
        for column, descriptor in schema[table].items():
            print(f"  {column}: {format_schema_type(descriptor)}")
    return 0


def _cmd_fields(args: argparse.Namespace, config: InspectorConfig) -> int:
    """Handle the fields subcommand."""
    schema = load_schema_file(args.schema)
    fields = derive_insert_fields(_table_columns(schema, args.table), config.identity_column)

    if args.json:
        print(json.dumps([field.model_dump(mode="json") for field in fields], indent=2))
        return 0

    for field in fields:
        parts = [field.name, field.type.value, "required" if field.required else "optional"]
        if field.options:
            parts.append(f"options={','.join(field.options)}")
        if field.reference_table:
            parts.append(f"references={field.reference_table}")
        print("  ".join(parts))
    return 0


def _cmd_rows(args: argparse.Namespace, config: InspectorConfig) -> int:
    """Handle the rows subcommand."""
    data = read_data_file(args.rows)
    if not isinstance(data, list) or not all(isinstance(row, Mapping) for row in data):
        print(f"Error: '{args.rows}' must contain a list of row mappings.", file=sys.stderr)
        return 1

    if args.columns:
        columns = [name.strip() for name in args.columns.split(",") if name.strip()]
    else:
        columns = list(dict.fromkeys(key for row in data for key in row))

    if args.schema is not None:
        if args.table is None:
            print("Error: --schema requires --table.", file=sys.stderr)
            return 1
        table_columns = _table_columns(load_schema_file(args.schema), args.table)
        for summary in describe_columns(table_columns, data):
            print(f"{summary.name}: {summary.schema_type} / {summary.runtime_type}")
    else:
        for column in columns:
            print(f"{column}: {infer_column_type(data, column)}")

    matches = filter_rows_by_search(data, args.search, columns)
    page = paginate_rows(matches, args.page, config.page_size)
    print()
    print("\t".join(columns))
    for row in page.rows:
        print("\t".join(format_cell(row[column]) if column in row else "" for column in columns))
    print(f"Page {page.page}/{page.page_count} ({page.total} rows)")
    return 0


def _cmd_parse(args: argparse.Namespace, config: InspectorConfig) -> int:
    """Handle the parse subcommand."""
    schema = load_schema_file(args.schema)
    fields = derive_insert_fields(_table_columns(schema, args.table), config.identity_column)

    raw_values: dict[str, str] = {}
    for item in args.values:
        name, separator, value = item.partition("=")
        if not separator:
            print(f"Error: expected NAME=VALUE, got '{item}'.", file=sys.stderr)
            return 1
        raw_values[name] = value

    unknown = sorted(set(raw_values) - {field.name for field in fields})
    if unknown:
        print(f"Error: table '{args.table}' has no insertable field(s): {', '.join(unknown)}.", file=sys.stderr)
        return 1

    row = parse_insert_row(fields, raw_values)
    for name, value in row.items():
        print(f"{name}: {format_cell(value)}")
    return 0


def _require_table(schema: DatabaseSchema, table: str) -> str:
    if table not in schema:
        raise SchemascopeError(f"unknown table '{table}'")
    return table


def _table_columns(schema: DatabaseSchema, table: str) -> TableSchema:
    return schema[_require_table(schema, table)]
