"""Resolution of column rows into TypeScript field types."""

from __future__ import annotations

from mssql_to_ts.core.schemas import ColumnDescriptor, ResolvedFieldType
from mssql_to_ts.resolution.constraint_extractor import extract_literals, literal_union
from mssql_to_ts.resolution.type_mapper import map_native_type


class FieldResolver:
    """Resolves the TypeScript type of each column.

    Columns governed by a check constraint take a literal union built from the
    constraint's quoted values. Constraints without a quoted literal, and
    columns without a constraint, fall back to the native type mapping.
    """

    def __init__(self, use_check_constraints: bool = True) -> None:
        """Initialize the field resolver.

        Args:
            use_check_constraints: Whether check constraints may produce literal
                unions. When False, every column uses the native type mapping.
        """
        self.use_check_constraints = use_check_constraints

    def resolve(self, column: ColumnDescriptor) -> ResolvedFieldType:
        """Resolve a single column.

        Args:
            column: Column row to resolve

        Returns:
            ResolvedFieldType carrying the base type expression and optionality
        """
        literals = None
        if self.use_check_constraints and column.check_constraint_name is not None:
            literals = extract_literals(column.check_constraint_definition)

        if literals is not None:
            type_expression = literal_union(literals)
        else:
            type_expression = map_native_type(column.native_type_name)

        return ResolvedFieldType(
            field_name=column.column_name,
            is_optional=column.is_nullable,
            type_expression=type_expression,
            literals=literals,
        )

    def resolve_all(self, columns: list[ColumnDescriptor]) -> list[ResolvedFieldType]:
        """Resolve columns in their stored order."""
        return [self.resolve(column) for column in columns]
