"""Loguru configuration. Silent unless --debug is passed."""

import sys

from loguru import logger

DEBUG_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> <level>{level: <7}</level> {name}:{function} - {message}"


def setup_logging(*, debug: bool) -> None:
    """Replace loguru's default sink; log to stderr at DEBUG only when requested."""
    logger.remove()
    if debug:
        logger.enable("mm_grep")
        logger.add(sys.stderr, level="DEBUG", format=DEBUG_FORMAT)
    else:
        logger.disable("mm_grep")
