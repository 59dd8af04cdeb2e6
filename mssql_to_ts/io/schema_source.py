"""Schema metadata retrieval from SQL Server."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine, text

from mssql_to_ts.core.config import config
from mssql_to_ts.core.constants import SCHEMA_QUERY
from mssql_to_ts.core.schemas import ColumnDescriptor, ConnectionDescriptor
from mssql_to_ts.logger import logger


class SchemaSource:
    """Reads the column rows of every user table and view.

    The catalog query already excludes system objects and check constraints
    outside the ``chk_`` naming convention, and orders rows by object name then
    column ordinal. Rows are returned as-is; no further filtering happens here.
    Driver and query errors propagate unchanged.
    """

    def __init__(self, engine: Engine, query: str = SCHEMA_QUERY) -> None:
        """Initialize the schema source.

        Args:
            engine: sqlalchemy engine bound to the target database
            query: Catalog query returning the ``ColumnDescriptor`` column aliases
        """
        self.engine = engine
        self.query = query

    @classmethod
    def from_descriptor(
        cls, descriptor: ConnectionDescriptor, driver: str = config.odbc_driver
    ) -> SchemaSource:
        """Create a schema source for a SQL Server connection.

        Args:
            descriptor: Assembled connection details
            driver: ODBC driver used by pyodbc

        Returns:
            SchemaSource over an ``mssql+pyodbc`` engine
        """
        logger.info("Connecting to %s", descriptor)
        engine = create_engine(descriptor.to_url(driver))
        return cls(engine)

    def fetch_columns(self) -> list[ColumnDescriptor]:
        """Run the catalog query and return every column row in source order.

        Returns:
            Materialized list of ColumnDescriptor rows

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the connection or the query fails
        """
        with self.engine.connect() as connection:
            result = connection.execute(text(self.query))
            columns = [
                ColumnDescriptor.model_validate(dict(row)) for row in result.mappings()
            ]

        logger.info("Fetched %d column row(s)", len(columns))
        return columns

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self.engine.dispose()

    def __enter__(self) -> SchemaSource:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
