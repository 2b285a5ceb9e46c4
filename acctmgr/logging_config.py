"""Logging configuration for acctmgr.

Log records go to stderr through rich so stdout carries only the menu
transcript.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str = DEFAULT_LOG_LEVEL, logger_name: str = "acctmgr") -> logging.Logger:
    """Configure the application logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        logger_name: Name of the logger to configure.

    Returns:
        Configured logger instance.

    Raises:
        ValueError: If level is not a known log level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates when called twice
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger
