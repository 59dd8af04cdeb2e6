"""Test custom configuration error handling."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mssql_to_ts.core.config import Config
from mssql_to_ts.core.exceptions import ConfigurationError
from mssql_to_ts.core.schemas import RenderMode


def test_defaults_without_environment():
    """Test that Config works with no MSSQL_TO_TS_ variables set."""
    with patch.dict(os.environ, {}, clear=True):
        config = Config()

    assert config.output_path == Path("types/database.ts")
    assert config.render_mode is RenderMode.DATABASE
    assert config.connection_string is None
    assert config.store.database_file == "connections.db"
    assert config.store.keyring_service == "mssql-to-ts"
    assert config.exit_codes.error_missing_secret == 4


def test_values_read_from_environment():
    """Test that prefixed and nested variables are picked up."""
    env = {
        "MSSQL_TO_TS_OUTPUT_PATH": "src/db/types.ts",
        "MSSQL_TO_TS_RENDER_MODE": "legacy",
        "MSSQL_TO_TS_CONNECTION_STRING": "Server=db;Database=app",
        "MSSQL_TO_TS_STORE__DIRECTORY": "/tmp/profiles",
    }
    with patch.dict(os.environ, env, clear=True):
        config = Config()

    assert config.output_path == Path("src/db/types.ts")
    assert config.render_mode is RenderMode.LEGACY
    assert config.connection_string.get_secret_value() == "Server=db;Database=app"
    assert config.store.database_path == Path("/tmp/profiles/connections.db")


def test_invalid_render_mode_raises_configuration_error():
    """Test that an invalid value raises ConfigurationError instead of ValidationError."""
    with patch.dict(os.environ, {"MSSQL_TO_TS_RENDER_MODE": "flat"}, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            Config()

    error = exc_info.value
    assert error.variable_name == "MSSQL_TO_TS_RENDER_MODE"
    assert error.reason
    assert "Invalid configuration variable 'MSSQL_TO_TS_RENDER_MODE'" in str(error)


def test_invalid_nested_value_names_nested_variable():
    """Test that nested settings report their double-underscore variable name."""
    env = {"MSSQL_TO_TS_EXIT_CODES__SUCCESS": "zero"}
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            Config()

    assert exc_info.value.variable_name == "MSSQL_TO_TS_EXIT_CODES__SUCCESS"


def test_missing_variable_message():
    """Test the message of a ConfigurationError without a reason."""
    error = ConfigurationError(variable_name="MSSQL_TO_TS_CONNECTION_STRING")

    assert str(error) == (
        "Required configuration variable 'MSSQL_TO_TS_CONNECTION_STRING' is not set"
    )
