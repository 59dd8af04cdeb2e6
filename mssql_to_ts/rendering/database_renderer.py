"""Rendering of the grouped schema into a single ``Database`` declaration."""

from __future__ import annotations

from mssql_to_ts.core.schemas import ColumnDescriptor, GroupedSchema
from mssql_to_ts.logger import logger
from mssql_to_ts.rendering.identifiers import property_name
from mssql_to_ts.resolution.field_resolver import FieldResolver

ROOT_INTERFACE = "Database"
TABLES_SECTION = "Tables"
VIEWS_SECTION = "Views"

SECTION_INDENT = "  "
OBJECT_INDENT = "    "
FIELD_INDENT = "      "


class DatabaseRenderer:
    """Renders tables and views as sections of one root interface.

    Output shape::

        export interface Database {
          Tables: {
            Customers: {
              Id: number;
              Status: "Active" | "Inactive";
            }
          }
          Views: {
          }
        }

    followed by ``Tables<T>`` and ``Views<T>`` lookup aliases. Check constraints
    yield literal unions and nullable columns render as ``Name?: T | null;``.
    """

    def __init__(self, resolver: FieldResolver | None = None) -> None:
        """Initialize the renderer.

        Args:
            resolver: Field resolver to use; defaults to a constraint-aware resolver
        """
        self.resolver = resolver or FieldResolver(use_check_constraints=True)

    def render(self, schema: GroupedSchema) -> str:
        """Render the full declaration text.

        Args:
            schema: Grouped tables and views

        Returns:
            TypeScript source text ending with a newline
        """
        lines = [f"export interface {ROOT_INTERFACE} {{"]
        lines.extend(self.render_section(TABLES_SECTION, schema.tables))
        lines.extend(self.render_section(VIEWS_SECTION, schema.views))
        lines.append("}")
        lines.append("")
        lines.extend(self.render_helper_types())

        logger.debug(
            "Rendered %d table(s) and %d view(s)", len(schema.tables), len(schema.views)
        )
        return "\n".join(lines) + "\n"

    def render_section(
        self, section: str, objects: dict[str, list[ColumnDescriptor]]
    ) -> list[str]:
        """Render one section (``Tables`` or ``Views``) in object order."""
        lines = [f"{SECTION_INDENT}{section}: {{"]
        for object_name, columns in objects.items():
            lines.append(f"{OBJECT_INDENT}{property_name(object_name)}: {{")
            lines.extend(self.render_fields(columns))
            lines.append(f"{OBJECT_INDENT}}}")
        lines.append(f"{SECTION_INDENT}}}")
        return lines

    def render_fields(self, columns: list[ColumnDescriptor]) -> list[str]:
        """Render field declarations in column order."""
        lines = []
        for field in self.resolver.resolve_all(columns):
            marker = "?" if field.is_optional else ""
            lines.append(
                f"{FIELD_INDENT}{property_name(field.field_name)}{marker}: "
                f"{field.nullable_type_expression};"
            )
        return lines

    def render_helper_types(self) -> list[str]:
        """Render the lookup aliases for indexing by table or view name."""
        return [
            f"export type {section}<T extends keyof {ROOT_INTERFACE}['{section}']> = "
            f"{ROOT_INTERFACE}['{section}'][T];"
            for section in (TABLES_SECTION, VIEWS_SECTION)
        ]
