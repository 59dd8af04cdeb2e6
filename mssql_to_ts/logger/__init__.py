"""Logging for the MSSQL to TypeScript generator.

Every component logs through the ``TypeGenerator`` logger. Its handlers are
attached by ``setup_logger`` from logging_config.json, which
routes records through a queue handler to stderr so stdout stays free for
``generate --stdout``.
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
