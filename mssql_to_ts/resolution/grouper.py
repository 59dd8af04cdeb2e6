"""Grouping of flat column rows into tables and views."""

from __future__ import annotations

from collections.abc import Iterable

from mssql_to_ts.core.schemas import ColumnDescriptor, GroupedSchema, ObjectKind
from mssql_to_ts.logger import logger


def group_columns(rows: Iterable[ColumnDescriptor]) -> GroupedSchema:
    """Group column rows by object kind and object name.

    Single pass over the rows. Object names keep their first-seen order and
    columns keep their input order; nothing is sorted.

    Args:
        rows: Column rows in source order

    Returns:
        GroupedSchema with one column list per table and per view
    """
    tables: dict[str, list[ColumnDescriptor]] = {}
    views: dict[str, list[ColumnDescriptor]] = {}

    for row in rows:
        content = views if row.object_kind is ObjectKind.VIEW else tables
        content.setdefault(row.object_name, []).append(row)

    logger.debug(
        "Grouped columns into %d table(s) and %d view(s)", len(tables), len(views)
    )
    return GroupedSchema(tables=tables, views=views)
