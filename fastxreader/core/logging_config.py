#!/usr/bin/env python3
"""Logging configuration using loguru for fastxreader."""

import contextlib
from pathlib import Path
from typing import Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

# Track file handler ID so we can avoid duplicates
_file_handler_id: int | None = None

# Default log format for files
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: LogLevel = "INFO", log_file: str | Path | None = None) -> None:
    """Configure loguru logging for the application.

    Records go to stderr so that parsed sequences written to stdout stay clean.

    Args:
        level: Minimum log level to display.
        log_file: Optional path to log file. If None, logs only to console.
    """
    logger.remove()

    # Only show INFO logs from the CLI module, but WARNING+ from the readers
    console_filter = {"fastxreader.cli": "INFO", "": "WARNING"} if level == "INFO" else None

    logger.add(
        RichHandler(console=Console(stderr=True), markup=False, show_time=False, show_level=True, show_path=False),
        format="{message}",
        level=level,
        filter=console_filter,
    )

    if log_file:
        add_file_handler(log_file, level=level)


def get_logger(name: str | None = None):
    """Get a logger instance.

    Args:
        name: Optional name for the logger context.

    Returns:
        Configured logger instance.
    """
    if name:
        return logger.bind(name=name)
    return logger


def add_file_handler(log_path: Path | str, level: LogLevel = "DEBUG") -> int:
    """Add a file handler to the logger.

    Only one file handler is active at a time; a previous one is removed.

    Args:
        log_path: Path to the log file.
        level: Minimum log level for file logging.

    Returns:
        Handler ID that can be used to remove the handler later.
    """
    global _file_handler_id

    if _file_handler_id is not None:
        with contextlib.suppress(ValueError):
            logger.remove(_file_handler_id)

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _file_handler_id = logger.add(
        str(log_path),
        format=LOG_FORMAT,
        level=level,
        rotation="10 MB",
        retention="7 days",
    )

    return _file_handler_id
