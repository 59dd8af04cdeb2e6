"""Core data models and shared types."""

from mssql_to_ts.core.config import config
from mssql_to_ts.core.exceptions import (
    ConfigurationError,
    ConnectionNotFoundError,
    DuplicateConnectionError,
    InvalidConnectionStringError,
    InvalidServerAddressError,
    MissingSecretError,
    TypeGenerationError,
)
from mssql_to_ts.core.schemas import (
    ColumnDescriptor,
    ConnectionDescriptor,
    ConnectionProfile,
    GroupedSchema,
    ObjectKind,
    RenderMode,
    ResolvedFieldType,
)

__all__ = [
    "ColumnDescriptor",
    "ConnectionDescriptor",
    "ConnectionProfile",
    "GroupedSchema",
    "ObjectKind",
    "RenderMode",
    "ResolvedFieldType",
    "TypeGenerationError",
    "ConfigurationError",
    "InvalidConnectionStringError",
    "InvalidServerAddressError",
    "ConnectionNotFoundError",
    "DuplicateConnectionError",
    "MissingSecretError",
    "config",
]
