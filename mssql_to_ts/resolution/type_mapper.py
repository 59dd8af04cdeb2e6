"""Mapping of SQL Server native types to TypeScript types."""

from __future__ import annotations

from mssql_to_ts.core.constants import (
    BOOLEAN_TYPE,
    DATE_TYPE,
    NUMBER_TYPE,
    STRING_TYPE,
    UNKNOWN_TYPE,
)

NATIVE_TYPE_FAMILIES: dict[str, tuple[str, ...]] = {
    BOOLEAN_TYPE: ("bit",),
    NUMBER_TYPE: (
        "tinyint",
        "smallint",
        "int",
        "bigint",
        "decimal",
        "numeric",
        "float",
        "real",
    ),
    DATE_TYPE: ("date", "datetime", "datetime2", "smalldatetime"),
    STRING_TYPE: (
        "uniqueidentifier",
        "char",
        "varchar",
        "text",
        "nchar",
        "nvarchar",
        "ntext",
    ),
}

_TYPE_LOOKUP: dict[str, str] = {
    native: ts_type
    for ts_type, natives in NATIVE_TYPE_FAMILIES.items()
    for native in natives
}


def map_native_type(native_type_name: str) -> str:
    """Map a SQL Server type name to a TypeScript type name.

    The lookup is case-insensitive. Types outside the known families map to
    ``any`` rather than raising.

    Examples:
        bit -> boolean
        NVARCHAR -> string
        datetime2 -> Date
        geography -> any
    """
    return _TYPE_LOOKUP.get(native_type_name.strip().lower(), UNKNOWN_TYPE)
