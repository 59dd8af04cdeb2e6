"""Connection profile storage."""

from mssql_to_ts.store.connection_store import ConnectionStore

__all__ = ["ConnectionStore"]
