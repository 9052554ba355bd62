# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Table listing helpers: ordering, grouping, search and pagination."""

from schemascope.tables.listing import (
    INTERNAL_TABLE_PREFIX,
    ColumnSummary,
    RowPage,
    TableGroups,
    describe_columns,
    filter_rows_by_search,
    paginate_rows,
    sort_tables,
    split_tables,
)

__all__ = [
    "INTERNAL_TABLE_PREFIX",
    "ColumnSummary",
    "RowPage",
    "TableGroups",
    "describe_columns",
    "filter_rows_by_search",
    "paginate_rows",
    "sort_tables",
    "split_tables",
]
