"""Command line interface for the MSSQL to TypeScript generator."""

from pathlib import Path

import typer
from keyring.errors import KeyringError
from rich.console import Console
from rich.table import Table

from mssql_to_ts.cli.generator import TypeGenerator
from mssql_to_ts.core.config import config
from mssql_to_ts.core.exceptions import (
    ConnectionNotFoundError,
    DuplicateConnectionError,
    InvalidConnectionStringError,
    InvalidServerAddressError,
    MissingSecretError,
)
from mssql_to_ts.core.schemas import ConnectionDescriptor, RenderMode
from mssql_to_ts.io.schema_source import SchemaSource
from mssql_to_ts.store.connection_store import ConnectionStore

app = typer.Typer(
    name="mssql-to-ts",
    help="Generate TypeScript declarations from MSSQL database tables and views.",
    add_completion=False,
)
connections_app = typer.Typer(help="Manage saved connection profiles")
app.add_typer(connections_app, name="connections")

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    err_console.print(f"[bold red]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print success message to stderr."""
    err_console.print(f"[bold green]✓[/] {message}")


def open_store() -> ConnectionStore:
    """Open the connection store configured for this user."""
    return ConnectionStore(
        db_path=config.store.database_path,
        service_name=config.store.keyring_service,
    )


def resolve_descriptor(
    connection: str | None,
    profile: str | None,
    store_factory=open_store,
) -> ConnectionDescriptor:
    """Resolve the connection to use from a connection string or a saved profile.

    Args:
        connection: ADO-style connection string given on the command line
        profile: Name of a saved connection profile
        store_factory: Callable returning the connection store

    Returns:
        Assembled connection descriptor

    Raises:
        typer.BadParameter: If both or neither of connection and profile are given
        InvalidConnectionStringError: If the connection string cannot be parsed
        InvalidServerAddressError: If the server port is not a valid number
        ConnectionNotFoundError: If the profile does not exist
        MissingSecretError: If the profile has no password in the keyring
    """
    if connection and profile:
        raise typer.BadParameter("Use either --connection or --profile, not both")

    if profile:
        with store_factory() as store:
            saved = store.get_connection_by_name(profile)
            if saved is None:
                raise ConnectionNotFoundError(profile)
            return store.build_descriptor(saved)

    connection_string = connection or (
        config.connection_string.get_secret_value()
        if config.connection_string
        else None
    )
    if not connection_string:
        raise typer.BadParameter(
            "A connection string (--connection or MSSQL_TO_TS_CONNECTION_STRING) "
            "or a saved --profile is required"
        )
    return ConnectionDescriptor.from_connection_string(connection_string)


@app.command()
def generate(
    connection: str | None = typer.Option(
        None,
        "--connection",
        "-c",
        help="Connection string, e.g. Server=localhost,1433;Database=db;"
        "User Id=sa;Password=pwd;Encrypt=true",
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Name of a saved connection profile"
    ),
    output: Path = typer.Option(
        config.output_path, "--output", "-o", help="Output file path"
    ),
    mode: RenderMode = typer.Option(
        config.render_mode, "--mode", "-m", help="Declaration layout"
    ),
    to_stdout: bool = typer.Option(
        False, "--stdout", help="Print the declarations instead of writing a file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Generate TypeScript types from the database schema."""
    try:
        descriptor = resolve_descriptor(connection, profile)
    except MissingSecretError as e:
        print_error(str(e))
        raise typer.Exit(config.exit_codes.error_missing_secret)
    except (
        ConnectionNotFoundError,
        InvalidConnectionStringError,
        InvalidServerAddressError,
    ) as e:
        print_error(str(e))
        raise typer.Exit(config.exit_codes.error_configuration)

    with SchemaSource.from_descriptor(descriptor, config.odbc_driver) as source:
        generator = TypeGenerator(source, output_path=output, mode=mode)
        generator.run(log_level="DEBUG" if verbose else None, to_stdout=to_stdout)

    if not to_stdout:
        print_success("Types generated successfully!")


@connections_app.command("add")
def add_connection(
    name: str = typer.Argument(..., help="Profile name"),
    server: str = typer.Option(..., "--server", "-s", help="Server, e.g. localhost,1433"),
    database: str = typer.Option(..., "--database", "-d", help="Database name"),
    username: str = typer.Option(..., "--username", "-u", help="SQL login"),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, help="SQL login password"
    ),
):
    """Save a connection profile; the password goes to the system keyring."""
    with open_store() as store:
        try:
            store.save_connection(name, server, database, username, password)
        except (DuplicateConnectionError, InvalidServerAddressError) as e:
            print_error(str(e))
            raise typer.Exit(config.exit_codes.error_configuration)
        except KeyringError as e:
            print_error(f"Could not store the password in the keyring: {e}")
            raise typer.Exit(config.exit_codes.error_missing_secret)
    print_success(f"Connection '{name}' saved")


@connections_app.command("list")
def list_connections():
    """List saved connection profiles."""
    with open_store() as store:
        profiles = store.get_all_connections()

    if not profiles:
        console.print("[yellow]No saved connections.[/yellow]")
        return

    table = Table(title="Connections")
    table.add_column("Name", style="cyan")
    table.add_column("Server", style="green")
    table.add_column("Database", style="blue")
    table.add_column("Username", style="magenta")
    table.add_column("Created")

    for profile in profiles:
        table.add_row(
            profile.name,
            profile.server,
            profile.database,
            profile.username,
            profile.created_at.isoformat(sep=" "),
        )

    console.print(table)


@connections_app.command("remove")
def remove_connection(name: str = typer.Argument(..., help="Profile name")):
    """Delete a saved connection profile and its password."""
    with open_store() as store:
        try:
            store.delete_connection(name)
        except ConnectionNotFoundError as e:
            print_error(str(e))
            raise typer.Exit(config.exit_codes.error_configuration)
    print_success(f"Connection '{name}' removed")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
