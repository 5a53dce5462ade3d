"""Logging bootstrap for the command line.

Log records go to stderr so they never mix with highlighted output on
stdout.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "colorize"
LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """Map the -v count to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure(verbosity: int = 0) -> logging.Logger:
    """Configure the colorize logger hierarchy with a single stderr handler.

    Calling this again replaces the previous handler.

    Args:
        verbosity: Number of -v flags

    Returns:
        The configured package logger
    """
    level = level_for_verbosity(verbosity)
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
