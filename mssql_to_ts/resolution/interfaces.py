from typing import Protocol

from mssql_to_ts.core.schemas import ColumnDescriptor, GroupedSchema


class ISchemaSource(Protocol):
    def fetch_columns(self) -> list[ColumnDescriptor]: ...


class ISchemaRenderer(Protocol):
    def render(self, schema: GroupedSchema) -> str: ...
