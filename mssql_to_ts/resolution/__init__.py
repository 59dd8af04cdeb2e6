"""Schema-to-type resolution components."""

from mssql_to_ts.resolution.constraint_extractor import extract_literals, literal_union
from mssql_to_ts.resolution.field_resolver import FieldResolver
from mssql_to_ts.resolution.grouper import group_columns
from mssql_to_ts.resolution.type_mapper import map_native_type

__all__ = [
    "FieldResolver",
    "extract_literals",
    "group_columns",
    "literal_union",
    "map_native_type",
]
