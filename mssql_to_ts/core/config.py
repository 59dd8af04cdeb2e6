"""Configuration for the MSSQL to TypeScript generator."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError
from .schemas import RenderMode

ENV_PREFIX = "MSSQL_TO_TS_"


class StoreConfig(BaseModel):
    """Configuration for the connection profile store."""

    directory: Path = Field(
        default_factory=lambda: Path.home() / ".mssql-to-ts",
        description="Directory holding the profile database",
    )
    database_file: str = "connections.db"
    keyring_service: str = "mssql-to-ts"

    @property
    def database_path(self) -> Path:
        """Full path of the profile database."""
        return self.directory / self.database_file


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_schema_source: int = 1
    error_file_system: int = 2
    error_configuration: int = 3
    error_missing_secret: int = 4
    error_unexpected: int = 5


class Config(BaseSettings):
    """Main configuration class for the MSSQL to TypeScript generator."""

    output_path: Path = Field(
        default=Path("types/database.ts"), description="Path of the generated file"
    )
    render_mode: RenderMode = Field(
        default=RenderMode.DATABASE, description="Declaration layout to emit"
    )
    connection_string: SecretStr | None = Field(
        default=None, description="ADO-style SQL Server connection string"
    )
    odbc_driver: str = Field(
        default="ODBC Driver 18 for SQL Server", description="ODBC driver for pyodbc"
    )
    log_level: str = Field(default="INFO", description="Console log level")

    # Nested configurations
    store: StoreConfig = Field(default_factory=StoreConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def __init__(self, **data):
        """Initialize config, reporting invalid values as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_path = "__".join(str(part) for part in error["loc"]) or "unknown"
            # Convert field name to environment variable name format
            env_var_name = f"{ENV_PREFIX}{field_path}".upper()
            if error["type"] == "missing":
                raise ConfigurationError(variable_name=env_var_name) from e
            raise ConfigurationError(
                variable_name=env_var_name, reason=error["msg"]
            ) from e


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
