# Copyright (c) Syntropy Systems
"""Helpers shared by snakecheck commands."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send library logs to stderr through rich.

    WARNING and above by default, everything with --verbose.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
