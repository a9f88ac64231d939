"""Loguru sink setup; library modules only log, the CLI configures"""

import sys

from loguru import logger


FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default handler with a single stderr sink at level."""
    logger.remove()
    logger.add(sys.stderr, format=FORMAT, level=level)
