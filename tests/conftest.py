"""Shared test fixtures and configuration."""

# Set test environment variables BEFORE any imports that might trigger config loading
import os  # noqa: E402
import tempfile  # noqa: E402

os.environ.setdefault("MSSQL_TO_TS_STORE__DIRECTORY", tempfile.mkdtemp())

import shutil
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
from keyring.errors import PasswordDeleteError

from mssql_to_ts.core.schemas import ColumnDescriptor, ObjectKind
from mssql_to_ts.resolution.interfaces import ISchemaSource
from mssql_to_ts.store.connection_store import ConnectionStore


def make_column(
    object_name: str,
    column_name: str,
    native_type_name: str,
    is_nullable: bool = False,
    constraint: tuple[str, str] | None = None,
    object_kind: ObjectKind = ObjectKind.TABLE,
    **extra: Any,
) -> ColumnDescriptor:
    """Build a column row the way the schema source would."""
    constraint_name, constraint_definition = constraint or (None, None)
    return ColumnDescriptor(
        object_name=object_name,
        column_name=column_name,
        native_type_name=native_type_name,
        is_nullable=is_nullable,
        check_constraint_name=constraint_name,
        check_constraint_definition=constraint_definition,
        object_kind=object_kind,
        **extra,
    )


@pytest.fixture
def column_factory():
    """Provide the column row builder."""
    return make_column


@pytest.fixture
def customer_rows() -> list[ColumnDescriptor]:
    """Customers table with a plain column and a constrained status column."""
    return [
        make_column("Customers", "Id", "int"),
        make_column(
            "Customers",
            "Status",
            "varchar",
            constraint=(
                "chk_status",
                "([Status]='Active' OR [Status]='Inactive')",
            ),
        ),
    ]


@pytest.fixture
def active_customers_view() -> list[ColumnDescriptor]:
    """View with a single nullable column."""
    return [
        make_column(
            "ActiveCustomers",
            "Name",
            "nvarchar",
            is_nullable=True,
            object_kind=ObjectKind.VIEW,
        )
    ]


@pytest.fixture
def mixed_rows(customer_rows, active_customers_view) -> list[ColumnDescriptor]:
    """Rows of two tables and a view, in catalog order."""
    return [
        *active_customers_view,
        *customer_rows,
        make_column("Orders", "OrderId", "bigint"),
        make_column("Orders", "PlacedAt", "datetime2", is_nullable=True),
        make_column(
            "Orders",
            "Total",
            "decimal",
            constraint=("chk_total_positive", "([Total]>(0))"),
        ),
    ]


@pytest.fixture
def mock_source(mixed_rows):
    """Mock schema source returning the mixed rows."""
    mock = Mock(spec=ISchemaSource)
    mock.fetch_columns.return_value = mixed_rows
    return mock


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


class FakeSecretStore:
    """In-memory stand-in for the keyring password functions."""

    def __init__(self) -> None:
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service_name: str, username: str) -> str | None:
        return self.passwords.get((service_name, username))

    def set_password(self, service_name: str, username: str, password: str) -> None:
        self.passwords[(service_name, username)] = password

    def delete_password(self, service_name: str, username: str) -> None:
        try:
            del self.passwords[(service_name, username)]
        except KeyError:
            raise PasswordDeleteError("Password not found") from None


@pytest.fixture
def secret_store():
    """Provide an empty in-memory secret store."""
    return FakeSecretStore()


@pytest.fixture
def connection_store(tmp_path, secret_store):
    """Connection store over a temporary SQLite file and the fake secret store."""
    store = ConnectionStore(
        db_path=tmp_path / "profiles" / "connections.db",
        service_name="mssql-to-ts-test",
        secret_store=secret_store,
    )
    yield store
    store.close()
