"""Pydantic models for type-safe data validation and parsing."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    field_validator,
    model_validator,
)
from sqlalchemy.engine import URL

from mssql_to_ts.core.constants import NULL_TYPE
from mssql_to_ts.core.exceptions import (
    InvalidConnectionStringError,
    InvalidServerAddressError,
)


class RenderMode(StrEnum):
    """Declaration layout of the generated file."""

    DATABASE = "database"
    LEGACY = "legacy"


class ObjectKind(StrEnum):
    """Kind of schema object a column belongs to."""

    TABLE = "Table"
    VIEW = "View"


class ColumnDescriptor(BaseModel):
    """One row of schema metadata as produced by the schema source.

    Fields can be populated either by name or by the column aliases of the
    catalog query (``TableName``, ``ColumnName``, ``DataType`` ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    object_name: str = Field(..., alias="TableName", min_length=1)
    column_name: str = Field(..., alias="ColumnName", min_length=1)
    native_type_name: str = Field(..., alias="DataType")
    max_length: int = Field(0, alias="MaxLength")
    precision: int = Field(0, alias="Precision")
    scale: int = Field(0, alias="Scale")
    is_nullable: bool = Field(..., alias="IsNullable")
    check_constraint_name: str | None = Field(None, alias="CheckConstraintName")
    check_constraint_definition: str | None = Field(
        None, alias="CheckConstraintDefinition"
    )
    object_kind: ObjectKind = Field(..., alias="ObjectType")

    @field_validator("native_type_name")
    @classmethod
    def normalize_native_type_name(cls, v: str) -> str:
        """Lower-case the native type name for comparison."""
        return v.strip().lower()

    @model_validator(mode="after")
    def validate_check_constraint_pair(self) -> ColumnDescriptor:
        """Ensure the constraint name and definition are present or absent together."""
        if (self.check_constraint_name is None) != (
            self.check_constraint_definition is None
        ):
            raise ValueError(
                "Check constraint name and definition must both be present or both absent"
            )
        return self


class GroupedSchema(BaseModel):
    """Columns grouped by object kind, then by object name.

    Both mappings keep the first-seen order of object names, and each column
    list keeps the order of the source rows.
    """

    model_config = ConfigDict(frozen=True)

    tables: dict[str, list[ColumnDescriptor]] = Field(default_factory=dict)
    views: dict[str, list[ColumnDescriptor]] = Field(default_factory=dict)


class ResolvedFieldType(BaseModel):
    """Rendering unit for a single column."""

    model_config = ConfigDict(frozen=True)

    field_name: str = Field(..., min_length=1)
    is_optional: bool
    type_expression: str = Field(..., description="Mapped scalar type or literal union")
    literals: tuple[str, ...] | None = Field(
        None, description="Quoted literals when the type came from a check constraint"
    )

    @property
    def nullable_type_expression(self) -> str:
        """Type expression with the null marker appended for optional fields."""
        if self.is_optional:
            return f"{self.type_expression} | {NULL_TYPE}"
        return self.type_expression


_CONNECTION_STRING_KEYS = {
    "server": "server",
    "data source": "server",
    "address": "server",
    "addr": "server",
    "database": "database",
    "initial catalog": "database",
    "user id": "username",
    "uid": "username",
    "user": "username",
    "password": "password",
    "pwd": "password",
    "encrypt": "encrypt",
    "trustservercertificate": "trust_server_certificate",
    "trust server certificate": "trust_server_certificate",
}

_TRUE_FLAGS = {"true", "yes", "1", "mandatory", "strict"}


def _odbc_value(value: str) -> str:
    """Brace-quote an ODBC attribute value when it contains reserved characters."""
    if any(ch in value for ch in ";{}"):
        return "{" + value.replace("}", "}}") + "}"
    return value


def split_server_address(server: str) -> tuple[str, int | None]:
    """Split a SQL Server ``host,port`` address.

    A ``tcp:`` prefix is dropped. The port is optional.

    Raises:
        InvalidServerAddressError: If the host is empty or the port is not a
            number between 1 and 65535
    """
    host, _, port = server.strip().removeprefix("tcp:").partition(",")
    host, port = host.strip(), port.strip()
    if not host:
        raise InvalidServerAddressError(server)
    if not port:
        return host, None
    if not (port.isascii() and port.isdigit()) or not 0 < int(port) <= 65535:
        raise InvalidServerAddressError(server)
    return host, int(port)


class ConnectionDescriptor(BaseModel):
    """Fully assembled SQL Server connection details."""

    model_config = ConfigDict(frozen=True)

    server: str = Field(..., min_length=1, description="Host name or address")
    port: int | None = Field(None, description="TCP port, if not the default")
    database: str = Field(..., min_length=1, description="Database name")
    username: str | None = Field(None, description="SQL login")
    password: SecretStr | None = Field(None, description="SQL login password")
    encrypt: bool = True
    trust_server_certificate: bool = False

    @classmethod
    def from_connection_string(cls, connection_string: str) -> ConnectionDescriptor:
        """Parse an ADO-style connection string.

        Example:
            ``Server=localhost,1433;Database=db;User Id=sa;Password=pwd;Encrypt=true``

        Args:
            connection_string: Semicolon separated ``key=value`` pairs

        Returns:
            ConnectionDescriptor with the parsed values

        Raises:
            InvalidConnectionStringError: If the server or database is missing
            InvalidServerAddressError: If the server port is not a valid number
        """
        values: dict[str, str] = {}
        for part in connection_string.split(";"):
            if not part.strip():
                continue
            key, _, value = part.partition("=")
            field_name = _CONNECTION_STRING_KEYS.get(key.strip().lower())
            if field_name:
                values[field_name] = value.strip()

        missing = [
            label
            for label, field_name in (("Server", "server"), ("Database", "database"))
            if not values.get(field_name)
        ]
        if missing:
            raise InvalidConnectionStringError(missing)

        host, port = split_server_address(values["server"])

        return cls(
            server=host,
            port=port,
            database=values["database"],
            username=values.get("username") or None,
            password=SecretStr(values["password"]) if "password" in values else None,
            encrypt=values.get("encrypt", "true").lower() in _TRUE_FLAGS,
            trust_server_certificate=(
                values.get("trust_server_certificate", "false").lower() in _TRUE_FLAGS
            ),
        )

    @property
    def server_address(self) -> str:
        """Server in SQL Server ``host,port`` notation."""
        return f"{self.server},{self.port}" if self.port else self.server

    def to_connection_string(self) -> str:
        """Render the descriptor back to an ADO-style connection string."""
        parts = [f"Server={self.server_address}", f"Database={self.database}"]
        if self.username:
            parts.append(f"User Id={self.username}")
        if self.password is not None:
            parts.append(f"Password={self.password.get_secret_value()}")
        parts.append(f"Encrypt={str(self.encrypt).lower()}")
        parts.append(
            f"TrustServerCertificate={str(self.trust_server_certificate).lower()}"
        )
        return ";".join(parts)

    def to_odbc_connect(self, driver: str) -> str:
        """Build an ODBC connection string for pyodbc.

        Args:
            driver: Installed ODBC driver name, e.g. ``ODBC Driver 18 for SQL Server``

        Returns:
            ODBC keyword string suitable for ``odbc_connect``
        """
        parts = [
            f"DRIVER={{{driver}}}",
            f"SERVER={_odbc_value(self.server_address)}",
            f"DATABASE={_odbc_value(self.database)}",
        ]
        if self.username:
            parts.append(f"UID={_odbc_value(self.username)}")
            if self.password is not None:
                parts.append(f"PWD={_odbc_value(self.password.get_secret_value())}")
        else:
            parts.append("Trusted_Connection=yes")
        parts.append(f"Encrypt={'yes' if self.encrypt else 'no'}")
        parts.append(
            f"TrustServerCertificate={'yes' if self.trust_server_certificate else 'no'}"
        )
        return ";".join(parts)

    def to_url(self, driver: str) -> URL:
        """Build a sqlalchemy URL for the ``mssql+pyodbc`` dialect."""
        return URL.create(
            "mssql+pyodbc", query={"odbc_connect": self.to_odbc_connect(driver)}
        )

    def __str__(self) -> str:
        """Return a password-free representation for logging."""
        user = f"{self.username}@" if self.username else ""
        return f"{user}{self.server_address}/{self.database}"


class ConnectionProfile(BaseModel):
    """Named connection profile as kept by the connection store.

    The password is never part of the profile; it lives in the keyring.
    """

    id: int
    name: str = Field(..., min_length=1)
    server: str
    database: str
    username: str
    created_at: datetime
