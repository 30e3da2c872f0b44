"""Logging setup for jute.

stderr carries the interactive display and stdout carries the JSON result,
so log records only ever go to a file.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Set up logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to. Without one, the
            package logger is silenced with a NullHandler.
    """
    package_logger = logging.getLogger("jute")
    if not log_file:
        package_logger.addHandler(logging.NullHandler())
        package_logger.propagate = False
        return

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
