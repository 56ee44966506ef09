"""Logging configuration for gitco."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"gitco.{name}")


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for gitco.

    Records go to stderr so they never mix with the branch list.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logger = logging.getLogger("gitco")
    logger.setLevel(getattr(logging, level.upper()))

    # Replace handlers from a previous call (the CLI may be invoked repeatedly in-process)
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(console_handler)

    logger.propagate = False
