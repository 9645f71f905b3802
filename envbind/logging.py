"""
Logging Configuration for envbind

The engine only logs at debug level through module loggers under the
``envbind`` namespace. Applications configure handlers themselves; the CLI
calls ``init_logging`` to get rich console output.

Example Usage:
    from envbind.logging import init_logging

    init_logging("DEBUG")
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def init_logging(level: Optional[str] = None, console: Optional[Console] = None) -> logging.Logger:
    """Initialize logging for the ``envbind`` package.

    Args:
        level: Logging level name (default: WARNING).
        console: Console to write to (default: stderr).

    Returns:
        The package logger.
    """
    if level is None:
        level = "WARNING"

    logger = logging.getLogger("envbind")
    logger.setLevel(level.upper())

    # Remove handlers installed by a previous call
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True), show_time=True, show_path=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
