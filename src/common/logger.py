"""Logging utilities with rich output for the command line.

This module combines Python's standard logging with rich's console output.
Everything here writes to stderr so that stdout only carries book listings.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Marked book as read")
    logger.error("Failed to open database", exc_info=True)
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from common.env import env

# Global console instance for consistent output
console = Console(stderr=True)

# Loggers handed out by get_logger, reset by setup_logging
_configured: set[str] = set()


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses env.log_level() (LOG_LEVEL, default WARNING).

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__, level="DEBUG")
        >>> logger.debug("Detailed info")
        DEBUG    Detailed info
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    if level is None:
        level = env.log_level()
    logger.setLevel(level.upper())

    logger.addHandler(_rich_handler())
    _configured.add(name)

    # Keep propagating so pytest's caplog still sees records
    logger.propagate = True

    return logger


def setup_logging(level: str = "WARNING") -> None:
    """Setup logging configuration for the entire application.

    This should be called once at the CLI entry point. Loggers obtained from
    get_logger before this call drop their own handler and level and defer to
    the root logger afterwards.

    Args:
        level: Default logging level for all modules
    """
    level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    for name in _configured:
        module_logger = logging.getLogger(name)
        module_logger.handlers.clear()
        module_logger.setLevel(logging.NOTSET)


def error(message: str) -> None:
    """Print an error message with red X icon.

    Example:
        >>> error("Dune is already marked as read")
        ✗ Dune is already marked as read
    """
    console.print(f"[red]✗[/red] {escape(message)}")
