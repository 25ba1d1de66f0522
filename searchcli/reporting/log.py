"""loguru setup for the CLI process."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<level>{level: <8}</level> <cyan>{name}</cyan> - {message}"


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_FORMAT, colorize=None)
