"""Named connection profiles backed by SQLite and the OS keyring."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Protocol

import keyring
from keyring.errors import PasswordDeleteError
from pydantic import SecretStr

from mssql_to_ts.core.config import config
from mssql_to_ts.core.exceptions import (
    ConnectionNotFoundError,
    DuplicateConnectionError,
    MissingSecretError,
)
from mssql_to_ts.core.schemas import (
    ConnectionDescriptor,
    ConnectionProfile,
    split_server_address,
)
from mssql_to_ts.logger import logger

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS connections (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT UNIQUE NOT NULL,
    server TEXT NOT NULL,
    database TEXT NOT NULL,
    username TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""


class ISecretStore(Protocol):
    def get_password(self, service_name: str, username: str) -> str | None: ...

    def set_password(
        self, service_name: str, username: str, password: str
    ) -> None: ...

    def delete_password(self, service_name: str, username: str) -> None: ...


class ConnectionStore:
    """Stores connection profiles and their passwords.

    Server, database and username live in a SQLite table; the password is kept
    in the secret store (the OS keyring by default) under the profile name.
    Instances are constructed explicitly and passed to whoever needs them.
    """

    def __init__(
        self,
        db_path: Path = config.store.database_path,
        service_name: str = config.store.keyring_service,
        secret_store: ISecretStore = keyring,
    ) -> None:
        """Initialize the connection store.

        Args:
            db_path: Path of the SQLite profile database
            service_name: Keyring service the passwords are filed under
            secret_store: Object exposing the keyring password functions
        """
        self.db_path = db_path
        self.service_name = service_name
        self.secret_store = secret_store
        self._connection: sqlite3.Connection | None = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection, creating the schema on first use."""
        if self._connection is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(self.db_path, isolation_level=None)
            self._connection.row_factory = sqlite3.Row
            self._connection.execute(SCHEMA_SQL)
            logger.debug("Connection store opened at %s", self.db_path)
        return self._connection

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None

    def save_connection(
        self,
        name: str,
        server: str,
        database: str,
        username: str,
        password: str,
    ) -> ConnectionProfile:
        """Save a new connection profile.

        The row and the password are saved together: if the keyring write
        fails, the row is rolled back and the keyring error is re-raised.

        Args:
            name: Unique profile name
            server: Server address, optionally ``host,port``
            database: Database name
            username: SQL login
            password: SQL login password, stored in the keyring only

        Returns:
            The stored profile

        Raises:
            InvalidServerAddressError: If the server port is not a valid number
            DuplicateConnectionError: If a profile with this name already exists
        """
        split_server_address(server)

        conn = self._get_connection()
        conn.execute("BEGIN")
        try:
            conn.execute(
                """
                INSERT INTO connections (name, server, database, username)
                VALUES (?, ?, ?, ?)
                """,
                (name, server, database, username),
            )
            self.secret_store.set_password(self.service_name, name, password)
        except sqlite3.IntegrityError as e:
            conn.execute("ROLLBACK")
            raise DuplicateConnectionError(name) from e
        except Exception:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")
        logger.info("Connection '%s' saved", name)

        profile = self.get_connection_by_name(name)
        if profile is None:
            raise ConnectionNotFoundError(name)
        return profile

    def get_all_connections(self) -> list[ConnectionProfile]:
        """Return every stored profile, newest first."""
        rows = self._get_connection().execute(
            "SELECT * FROM connections ORDER BY created_at DESC, id DESC"
        )
        return [self._to_profile(row) for row in rows]

    def get_connection_by_name(self, name: str) -> ConnectionProfile | None:
        """Return the profile with the given name, or None if there is none."""
        row = (
            self._get_connection()
            .execute("SELECT * FROM connections WHERE name = ?", (name,))
            .fetchone()
        )
        return self._to_profile(row) if row is not None else None

    def delete_connection(self, name: str) -> None:
        """Delete a profile and its password.

        Raises:
            ConnectionNotFoundError: If no profile has this name
        """
        cursor = self._get_connection().execute(
            "DELETE FROM connections WHERE name = ?", (name,)
        )
        if cursor.rowcount == 0:
            raise ConnectionNotFoundError(name)

        try:
            self.secret_store.delete_password(self.service_name, name)
        except PasswordDeleteError:
            logger.warning("No stored password for connection '%s'", name)
        logger.info("Connection '%s' deleted", name)

    def build_descriptor(self, profile: ConnectionProfile) -> ConnectionDescriptor:
        """Assemble a connection descriptor from a profile and its password.

        Raises:
            MissingSecretError: If the keyring holds no password for the profile
            InvalidServerAddressError: If the stored server port is not a valid number
        """
        password = self.secret_store.get_password(self.service_name, profile.name)
        if not password:
            raise MissingSecretError(profile.name)

        host, port = split_server_address(profile.server)
        return ConnectionDescriptor(
            server=host,
            port=port,
            database=profile.database,
            username=profile.username,
            password=SecretStr(password),
            encrypt=True,
            trust_server_certificate=True,
        )

    def build_connection_string(self, profile: ConnectionProfile) -> str:
        """Assemble an ADO-style connection string for a profile.

        Raises:
            MissingSecretError: If the keyring holds no password for the profile
        """
        return self.build_descriptor(profile).to_connection_string()

    def _to_profile(self, row: sqlite3.Row) -> ConnectionProfile:
        return ConnectionProfile.model_validate(dict(row))

    def __enter__(self) -> ConnectionStore:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
