"""Logging configuration for the archguard command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: str | Path) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="w")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    logger_name: str = "archguard",
    log_file: str | Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Attach a stderr handler and, optionally, a DEBUG file handler.

    Library modules log under ``archguard.*``; configuring the ``archguard``
    logger covers all of them. Calling this again replaces the handlers
    installed by the previous call.

    Args:
        logger_name: Logger to configure
        log_file: Log file path, truncated on open (None for no file)
        verbose: DEBUG instead of INFO on the console
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(verbose))
    if log_file:
        logger.addHandler(_file_handler(log_file))
    return logger
