"""Custom exception classes for the MSSQL to TypeScript generator."""

from __future__ import annotations


class TypeGenerationError(Exception):
    """Base exception for type generation errors.

    All custom exceptions in the MSSQL to TypeScript generator inherit from this class.
    Schema source and output failures are not wrapped and propagate as raised by
    the driver or the file system.
    """

    pass


class ConfigurationError(TypeGenerationError):
    """Error in application configuration.

    Raised when required configuration values are missing or invalid,
    such as missing environment variables or invalid configuration settings.

    Args:
        variable_name: The name of the configuration variable that caused the error
        reason: Optional description of why the value was rejected
    """

    def __init__(self, variable_name: str, reason: str | None = None) -> None:
        self.variable_name = variable_name
        self.reason = reason
        if reason:
            message = f"Invalid configuration variable '{variable_name}': {reason}"
        else:
            message = f"Required configuration variable '{variable_name}' is not set"
        super().__init__(message)


class InvalidConnectionStringError(TypeGenerationError):
    """Error when a connection string cannot be turned into a connection descriptor.

    Args:
        missing: Names of the keys that are required but absent
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            f"Connection string is missing required keys: {', '.join(missing)}"
        )


class InvalidServerAddressError(TypeGenerationError):
    """Error when a server address is not ``host`` or ``host,port``.

    Args:
        server: The rejected server address
    """

    def __init__(self, server: str) -> None:
        self.server = server
        super().__init__(
            f"Invalid server address '{server}': expected host or host,port "
            "with a port between 1 and 65535"
        )


class ConnectionNotFoundError(TypeGenerationError):
    """Raised when a named connection profile does not exist in the store."""

    def __init__(self, connection_name: str) -> None:
        self.connection_name = connection_name
        super().__init__(f"Connection not found: {connection_name}")


class DuplicateConnectionError(TypeGenerationError):
    """Raised when saving a connection profile under a name that is already taken."""

    def __init__(self, connection_name: str) -> None:
        self.connection_name = connection_name
        super().__init__(f"Connection already exists: {connection_name}")


class MissingSecretError(TypeGenerationError):
    """Error when the password of a stored connection is absent from the keyring.

    Raised before any schema access is attempted.

    Args:
        connection_name: Name of the connection profile whose secret is missing
    """

    def __init__(self, connection_name: str) -> None:
        self.connection_name = connection_name
        super().__init__(f"Password not found for connection: {connection_name}")
