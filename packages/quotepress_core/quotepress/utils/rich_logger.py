"""
Rich logging for QuotePress.

Provides colorful console logging using the rich library.
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "QUOTEPRESS_LOG_LEVEL"


def resolve_level(level: Optional[str] = None) -> int:
    """Resolve a level name, falling back to ``$QUOTEPRESS_LOG_LEVEL`` then WARNING."""
    name = level or os.environ.get(LOG_LEVEL_ENV) or "WARNING"
    return getattr(logging, name.upper(), logging.WARNING)


def setup_logging(level: Optional[str] = None, use_rich: bool = True,
                  console: Optional[Console] = None) -> logging.Logger:
    """
    Setup logging for the ``quotepress`` package.

    Args:
        level: Log level name (defaults to ``$QUOTEPRESS_LOG_LEVEL`` or WARNING)
        use_rich: Whether to use a rich handler
        console: Optional rich console (stderr by default)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger("quotepress")
    package_logger.setLevel(resolve_level(level))
    package_logger.handlers.clear()

    if use_rich:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger
