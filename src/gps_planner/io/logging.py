"""Define utility functions to simplify logging to the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("gps_planner")
console = Console()


def log_info(message: str) -> None:
    """Log the given string at the INFO level."""
    logger.info(message)


def log_debug(message: str) -> None:
    """Log the given string at the DEBUG level."""
    logger.debug(message)


def configure_logging(verbose: bool = False) -> None:
    """Route the package's log records through a Rich handler writing to the shared console.

    :param verbose: Whether to show INFO and DEBUG records (defaults to False)
    """
    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
