"""Tests for the pydantic data models."""

import pytest
from pydantic import SecretStr, ValidationError

from mssql_to_ts.core.exceptions import (
    InvalidConnectionStringError,
    InvalidServerAddressError,
)
from mssql_to_ts.core.schemas import (
    ColumnDescriptor,
    ConnectionDescriptor,
    ObjectKind,
    ResolvedFieldType,
    split_server_address,
)


class TestColumnDescriptor:
    """Test suite for ColumnDescriptor."""

    def test_validate_from_query_aliases(self):
        """Rows keyed by the catalog query aliases are accepted."""
        column = ColumnDescriptor.model_validate(
            {
                "TableName": "Customers",
                "ColumnName": "Status",
                "DataType": "VarChar",
                "MaxLength": 20,
                "Precision": 0,
                "Scale": 0,
                "IsNullable": 0,
                "CheckConstraintName": "chk_status",
                "CheckConstraintDefinition": "([Status]='A')",
                "ObjectType": "Table",
            }
        )

        assert column.object_name == "Customers"
        assert column.native_type_name == "varchar"
        assert column.is_nullable is False
        assert column.object_kind is ObjectKind.TABLE

    def test_constraint_name_without_definition_is_rejected(self):
        with pytest.raises(ValidationError, match="both be present or both absent"):
            ColumnDescriptor(
                object_name="T",
                column_name="C",
                native_type_name="int",
                is_nullable=False,
                check_constraint_name="chk_c",
                object_kind=ObjectKind.TABLE,
            )

    def test_unknown_object_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            ColumnDescriptor(
                object_name="T",
                column_name="C",
                native_type_name="int",
                is_nullable=False,
                object_kind="Procedure",
            )

    def test_descriptor_is_frozen(self, customer_rows):
        with pytest.raises(ValidationError):
            customer_rows[0].column_name = "Other"


class TestResolvedFieldType:
    """Test suite for ResolvedFieldType."""

    def test_nullable_type_expression(self):
        field = ResolvedFieldType(
            field_name="Name", is_optional=True, type_expression="string"
        )
        assert field.nullable_type_expression == "string | null"

    def test_literal_union_gets_null_member(self):
        field = ResolvedFieldType(
            field_name="Status",
            is_optional=True,
            type_expression='"A" | "B"',
            literals=('"A"', '"B"'),
        )
        assert field.nullable_type_expression == '"A" | "B" | null'


class TestConnectionDescriptor:
    """Test suite for ConnectionDescriptor."""

    def test_parse_full_connection_string(self):
        descriptor = ConnectionDescriptor.from_connection_string(
            "Server=localhost,1433;Database=db;User Id=sa;Password=pwd;Encrypt=true"
        )

        assert descriptor.server == "localhost"
        assert descriptor.port == 1433
        assert descriptor.database == "db"
        assert descriptor.username == "sa"
        assert descriptor.password.get_secret_value() == "pwd"
        assert descriptor.encrypt is True
        assert descriptor.trust_server_certificate is False

    def test_parse_aliases_and_flags(self):
        descriptor = ConnectionDescriptor.from_connection_string(
            "Data Source=tcp:db.example.com;Initial Catalog=Sales;UID=app;"
            "PWD=secret;Encrypt=no;TrustServerCertificate=yes;"
        )

        assert descriptor.server == "db.example.com"
        assert descriptor.port is None
        assert descriptor.database == "Sales"
        assert descriptor.username == "app"
        assert descriptor.encrypt is False
        assert descriptor.trust_server_certificate is True

    def test_password_may_contain_equals_sign(self):
        descriptor = ConnectionDescriptor.from_connection_string(
            "Server=s;Database=d;User Id=u;Password=a=b"
        )

        assert descriptor.password.get_secret_value() == "a=b"

    def test_missing_keys_are_reported(self):
        with pytest.raises(InvalidConnectionStringError) as exc_info:
            ConnectionDescriptor.from_connection_string("User Id=sa;Password=pwd")

        assert exc_info.value.missing == ["Server", "Database"]
        assert "Server, Database" in str(exc_info.value)

    def test_to_connection_string(self):
        descriptor = ConnectionDescriptor(
            server="localhost",
            port=1433,
            database="db",
            username="sa",
            password=SecretStr("pwd"),
            trust_server_certificate=True,
        )

        assert descriptor.to_connection_string() == (
            "Server=localhost,1433;Database=db;User Id=sa;Password=pwd;"
            "Encrypt=true;TrustServerCertificate=true"
        )

    def test_to_odbc_connect_with_login(self):
        descriptor = ConnectionDescriptor(
            server="localhost",
            port=1433,
            database="db",
            username="sa",
            password=SecretStr("p;w{d}"),
        )

        assert descriptor.to_odbc_connect("ODBC Driver 18 for SQL Server") == (
            "DRIVER={ODBC Driver 18 for SQL Server};SERVER=localhost,1433;"
            "DATABASE=db;UID=sa;PWD={p;w{d}}};Encrypt=yes;TrustServerCertificate=no"
        )

    def test_to_odbc_connect_without_login_uses_trusted_connection(self):
        descriptor = ConnectionDescriptor(server="srv", database="db", encrypt=False)

        assert descriptor.to_odbc_connect("SQL Server") == (
            "DRIVER={SQL Server};SERVER=srv;DATABASE=db;Trusted_Connection=yes;"
            "Encrypt=no;TrustServerCertificate=no"
        )

    def test_to_url(self):
        descriptor = ConnectionDescriptor(server="srv", database="db")

        url = descriptor.to_url("SQL Server")

        assert url.drivername == "mssql+pyodbc"
        assert url.query["odbc_connect"] == descriptor.to_odbc_connect("SQL Server")

    def test_str_hides_password(self):
        descriptor = ConnectionDescriptor(
            server="srv",
            port=1433,
            database="db",
            username="sa",
            password=SecretStr("hunter2"),
        )

        assert str(descriptor) == "sa@srv,1433/db"
        assert "hunter2" not in repr(descriptor)

    @pytest.mark.parametrize(
        "server", ["localhost,abc", "localhost,0", "localhost,70000", "localhost,-1"]
    )
    def test_invalid_port_is_rejected(self, server):
        with pytest.raises(InvalidServerAddressError) as exc_info:
            ConnectionDescriptor.from_connection_string(f"Server={server};Database=db")

        assert exc_info.value.server == server


class TestSplitServerAddress:
    """Test suite for split_server_address."""

    @pytest.mark.parametrize(
        "server, expected",
        [
            ("localhost", ("localhost", None)),
            ("localhost,1433", ("localhost", 1433)),
            ("tcp:db.example.com, 1444", ("db.example.com", 1444)),
            ("localhost,", ("localhost", None)),
        ],
    )
    def test_valid_addresses(self, server, expected):
        assert split_server_address(server) == expected

    @pytest.mark.parametrize("server", ["", ",1433", "host,14x3", "host,²"])
    def test_invalid_addresses(self, server):
        with pytest.raises(InvalidServerAddressError):
            split_server_address(server)
