"""Centralized logging configuration for the quote engine.

Every module obtains its logger through ``get_logger(__name__)`` so that
callers (the Gradio app, the CLI script, tests) control output in one place.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """Configure the root logger with a console handler and optional file handler.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file
        format_string: Optional custom format string

    Returns:
        Configured root logger instance

    Example:
        >>> logger = setup_logging(level="DEBUG")
        >>> logger.debug("Quote engine ready")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (typically ``__name__``).

    The logger inherits configuration from the root logger.
    """
    return logging.getLogger(name)


# Initialize logging on module import
# LOG_LEVEL environment variable overrides the default
setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))
