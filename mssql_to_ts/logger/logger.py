import atexit
import json
import logging
import logging.config
from pathlib import Path

CONFIG_FILE = Path(__file__).parent / "logging_config.json"

logger = logging.getLogger("TypeGenerator")


def setup_logger(level: str | None = None) -> logging.Logger:
    """Configure the TypeGenerator logger from logging_config.json.

    Args:
        level: Console level overriding the one in the config file
    """
    with open(CONFIG_FILE) as f:
        logging_config = json.load(f)
    if level is not None:
        logging_config["handlers"]["stderr"]["level"] = level.upper()

    logging.config.dictConfig(logging_config)

    queue_handler = logging.getHandlerByName("queue_handler")
    listener = getattr(queue_handler, "listener", None)
    if listener is not None:
        listener.start()
        atexit.register(listener.stop)
    return logger
