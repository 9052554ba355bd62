# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Table listing, row search and pagination over loaded rows."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from schemascope.cells.values import Row, format_cell, infer_column_type
from schemascope.introspect.formatter import format_schema_type

# ###############
# Public Interface
# ###############

INTERNAL_TABLE_PREFIX = "evolu_"


@dataclass(frozen=True)
class TableGroups:
    """Table names split into application tables and storage-internal tables."""

    regular: list[str] = field(default_factory=list)
    internal: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RowPage:
    """One page of rows.

    Attributes:
        rows: Rows on this page.
        page: 1-based page number actually shown.
        page_count: Total number of pages; at least 1.
        total: Number of rows across all pages.
    """

    rows: list[Row]
    page: int
    page_count: int
    total: int


@dataclass(frozen=True)
class ColumnSummary:
    """Declared and observed type of one column."""

    name: str
    schema_type: str
    runtime_type: str


def sort_tables(tables: Iterable[str]) -> list[str]:
    """Return table names in case-insensitive alphabetical order."""
    return sorted(tables, key=str.casefold)


def split_tables(tables: Iterable[str], internal_prefix: str = INTERNAL_TABLE_PREFIX) -> TableGroups:
    """Separate the storage engine's bookkeeping tables from application tables."""
    names = list(tables)
    return TableGroups(
        regular=[name for name in names if not name.startswith(internal_prefix)],
        internal=[name for name in names if name.startswith(internal_prefix)],
    )


def filter_rows_by_search(rows: Sequence[Row], query: str, columns: Sequence[str]) -> list[Row]:
    """Keep rows where any visible column's displayed text contains *query*.

    Matching is case-insensitive and uses the same rendering as the table
    cells. A blank query keeps every row.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(rows)
    return [
        row for row in rows if any(needle in format_cell(row[column]).casefold() for column in columns if column in row)
    ]


def paginate_rows(rows: Sequence[Row], page: int, page_size: int) -> RowPage:
    """Return the 1-based *page* of *rows*, clamping out-of-range page numbers.

    Raises:
        ValueError: If *page_size* is not positive.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total = len(rows)
    page_count = max(1, math.ceil(total / page_size))
    current = min(max(page, 1), page_count)
    start = (current - 1) * page_size
    return RowPage(rows=list(rows[start : start + page_size]), page=current, page_count=page_count, total=total)


def describe_columns(columns: Mapping[str, object], rows: Sequence[Row]) -> list[ColumnSummary]:
    """Pair each column's declared type signature with its observed runtime type."""
    return [
        ColumnSummary(name=name, schema_type=format_schema_type(descriptor), runtime_type=infer_column_type(rows, name))
        for name, descriptor in columns.items()
    ]
