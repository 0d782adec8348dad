"""Logging utilities with rich output for the vcs-meta CLI.

Standard library logging with rich's console handler. Library modules only
ask for a logger; the CLI entry point calls setup_logging() once.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("git log -n 5 in /repo")
    logger.warning("Stats unavailable for abc1234")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Records go to stdout, diagnostics to stderr, so JSON output stays pipeable
console = Console()
err_console = Console(stderr=True)

# Loggers handed out by get_logger(), handed back to the root logger by setup_logging()
_configured_loggers: set[str] = set()


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=err_console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,  # git output may contain [brackets]
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    logger.setLevel(level.upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))
    _configured_loggers.add(name)

    # Keep propagation so pytest's caplog sees records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger for the whole application.

    Called once from the CLI entry point.

    Args:
        level: Default logging level for all modules (LOG_LEVEL overrides)
        log_file: Optional file path to also log to a file
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    # Module loggers defer to the root so nothing is printed twice
    for name in _configured_loggers:
        module_logger = logging.getLogger(name)
        module_logger.handlers.clear()
        module_logger.setLevel(logging.NOTSET)
    _configured_loggers.clear()

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def error(message: str) -> None:
    """Print an error message with a red X icon.

    Example:
        >>> error("git diff --name-status HEAD failed: not a git repository")
        ✗ git diff --name-status HEAD failed: not a git repository
    """
    err_console.print(f"[red]✗[/red] {escape(message)}")
