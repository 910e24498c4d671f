"""Centralized logging configuration for termfolio."""

import logging
import sys
from pathlib import Path

from ..config import LogLevel

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Path | None = None,
    console_level: LogLevel = "WARNING",
    console: bool = True,
) -> logging.Logger:
    """Configure application logging.

    Args:
        level: Root logging level
        log_file: Optional file path for logging
        console_level: Level for console output (default WARNING to keep CLI clean)
        console: Attach the stderr handler. The full-screen viewer turns this off
            so log lines do not tear the alternate screen.

    Returns:
        Configured root logger instance
    """
    logger = logging.getLogger("termfolio")
    logger.setLevel(getattr(logging, level))

    # Clear existing handlers
    logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level))
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the termfolio namespace.

    Args:
        name: Logger name (will be prefixed with 'termfolio.')

    Returns:
        Logger instance
    """
    full_name = f"termfolio.{name}" if not name.startswith("termfolio") else name

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)

    return _loggers[full_name]
