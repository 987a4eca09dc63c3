"""Logging setup — Rich handler on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Route the ``prpolicy`` logger tree through a RichHandler."""
    logger = logging.getLogger("prpolicy")
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    )
    logger.propagate = False
