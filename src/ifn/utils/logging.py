"""Logging helpers shared by every ifn module."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Handlers are attached by configure_logging()."""
    return logging.getLogger(name)


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for CLI runs.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...). Defaults to INFO.

    Raises:
        ValueError: If the level name is not a known logging level
    """
    level_name = (level or "INFO").upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("ifn").setLevel(numeric_level)
