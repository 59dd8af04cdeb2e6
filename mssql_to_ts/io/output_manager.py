"""File system operations for output generation."""

from __future__ import annotations

from pathlib import Path

from mssql_to_ts.core.config import config
from mssql_to_ts.logger import logger


class OutputManager:
    """Manages file system operations for output generation.

    This class writes rendered declarations to their destination, creating the
    parent directories on the way. File system errors are not wrapped.
    """

    def __init__(self, output_path: Path = config.output_path) -> None:
        """Initialize the output manager.

        Args:
            output_path: Default destination of the generated file
        """
        self.output_path = output_path

    def create_output_structure(self, output_path: Path | None = None) -> Path:
        """Create the parent directory of the destination.

        Args:
            output_path: Destination file; defaults to the manager's output path

        Returns:
            The directory that now exists

        Raises:
            OSError: If the directory cannot be created
        """
        output_dir = (output_path or self.output_path).parent
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

    def write_types(self, content: str, output_path: Path | None = None) -> Path:
        """Write rendered declarations, replacing any previous content.

        Args:
            content: Rendered TypeScript source text
            output_path: Destination file; defaults to the manager's output path

        Returns:
            Path where the file was written

        Raises:
            OSError: If the directory or the file cannot be written
        """
        destination = output_path or self.output_path
        self.create_output_structure(destination)

        with open(destination, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)

        logger.info("Types written to: %s", destination)
        return destination
