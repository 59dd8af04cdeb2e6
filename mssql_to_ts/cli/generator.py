"""Main class that orchestrates the type generation process."""

from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from mssql_to_ts.core.config import config
from mssql_to_ts.core.schemas import RenderMode
from mssql_to_ts.io.output_manager import OutputManager
from mssql_to_ts.logger import logger, setup_logger
from mssql_to_ts.rendering import get_renderer
from mssql_to_ts.resolution.grouper import group_columns
from mssql_to_ts.resolution.interfaces import ISchemaRenderer, ISchemaSource


class TypeGenerator:
    """Main class that orchestrates the type generation process.

    This class reads the column rows from the schema source, groups them into
    tables and views, renders the declarations and writes them out. The full
    row set is fetched before anything is written, so a failing source leaves
    any previous output untouched.
    """

    def __init__(
        self,
        source: ISchemaSource,
        output_path: Path = config.output_path,
        mode: RenderMode = config.render_mode,
    ) -> None:
        """Initialize the type generator.

        Args:
            source: Supplier of the column rows
            output_path: Path of the generated file
            mode: Declaration layout to emit
        """
        self.source = source
        self.output_path = output_path
        self.mode = mode
        self.renderer: ISchemaRenderer = get_renderer(mode)
        self.output_manager = OutputManager(output_path)

    def run(self, log_level: str | None = None, to_stdout: bool = False) -> None:
        """Run the complete generation process.

        Args:
            log_level: Console log level; defaults to the configured level
            to_stdout: Print the declarations instead of writing the output file

        Raises:
            SystemExit: If any error occurs during generation
        """
        try:
            setup_logger(log_level or config.log_level)
            logger.info("Generating TypeScript types (%s layout)...", self.mode)
            if to_stdout:
                sys.stdout.write(self.render())
            else:
                output_path = self.generate()
                logger.info("Types generated successfully! Written to %s", output_path)
        except SQLAlchemyError as e:
            logger.error("Failed to read database schema: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_schema_source)
        except OSError as e:
            logger.error("Failed to write output file: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_file_system)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(config.exit_codes.error_unexpected)

    def run_for_testing(self) -> Path:
        """Run the complete generation process for testing.

        Unlike run(), this method raises exceptions instead of calling sys.exit(),
        making it suitable for unit tests.

        Returns:
            Path where the types were written
        """
        logger.info("Generating TypeScript types (%s layout)...", self.mode)
        return self.generate()

    def generate(self) -> Path:
        """Fetch, group, render and write the declarations.

        Returns:
            Path where the types were written

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the schema source fails
            OSError: If the output cannot be written
        """
        content = self.render()
        return self.output_manager.write_types(content)

    def render(self) -> str:
        """Fetch and render the declarations without writing them."""
        return self.renderer.render(group_columns(self.source.fetch_columns()))
