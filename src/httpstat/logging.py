"""Logging configuration for httpstat."""

import logging
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log level enumeration."""

    NORMAL = logging.WARNING
    DEBUG = logging.DEBUG


def configure_logging(debug: bool = False, no_color: bool = False) -> Console:
    """Configure logging to stderr.

    Args:
        debug: Log the curl command line and raw timing output
        no_color: Disable colored output

    Returns:
        The stderr console used by the log handler
    """
    level = LogLevel.DEBUG if debug else LogLevel.NORMAL

    console = Console(
        stderr=True,
        no_color=no_color,
        color_system=None if no_color else "auto",
    )

    handler = RichHandler(
        console=console,
        show_time=debug,
        show_path=debug,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
