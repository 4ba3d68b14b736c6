"""Console logging setup for the clarifai_v1 package logger."""

import logging
import sys

from clarifai_v1.core.config import get_config

PACKAGE_LOGGER = "clarifai_v1"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleHandler(logging.StreamHandler):
    """StreamHandler marker so setup_logging can find the handler it installed."""


def setup_logging(level: str | int | None = None, stream=None) -> logging.Logger:
    """
    Configure logging for the client library and return the package logger.

    Invariants:
    - Only the "clarifai_v1" logger is touched; the root logger and application handlers are left alone.
    - Calling again replaces the console handler installed previously (no duplicate output).
    - level defaults to Settings.log_level from get_config().
    """
    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for h in logger.handlers[:]:
        if isinstance(h, _ConsoleHandler):
            logger.removeHandler(h)

    console = _ConsoleHandler(stream if stream is not None else sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(console)
    return logger
