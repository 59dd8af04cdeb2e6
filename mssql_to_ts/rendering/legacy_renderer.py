"""Rendering of one flat interface per table (legacy layout)."""

from __future__ import annotations

from mssql_to_ts.core.schemas import ColumnDescriptor, GroupedSchema
from mssql_to_ts.logger import logger
from mssql_to_ts.rendering.identifiers import property_name, unique_type_names
from mssql_to_ts.resolution.field_resolver import FieldResolver

FIELD_INDENT = "  "


class LegacyRenderer:
    """Renders each table as its own exported interface.

    Views are left out, check constraints are ignored and nullable columns
    are marked with ``?`` only, without a ``null`` member in their type.
    """

    def __init__(self) -> None:
        self.resolver = FieldResolver(use_check_constraints=False)

    def render(self, schema: GroupedSchema) -> str:
        """Render every table of the schema, separated by blank lines.

        Interface names are made unique in table order, so two tables that
        sanitize to the same identifier never merge into one declaration.
        """
        interface_names = unique_type_names(list(schema.tables))
        blocks = [
            self.render_interface(interface_names[table_name], columns)
            for table_name, columns in schema.tables.items()
        ]
        if schema.views:
            logger.debug("Legacy layout skips %d view(s)", len(schema.views))
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def render_interface(
        self, interface_name: str, columns: list[ColumnDescriptor]
    ) -> str:
        lines = [f"export interface {interface_name} {{"]
        for field in self.resolver.resolve_all(columns):
            marker = "?" if field.is_optional else ""
            lines.append(
                f"{FIELD_INDENT}{property_name(field.field_name)}{marker}: "
                f"{field.type_expression};"
            )
        lines.append("}")
        return "\n".join(lines)
