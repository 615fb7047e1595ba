"""Logging setup for the company services."""

import logging
import sys
from typing import Union


def setup_logger(name: str = "app", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure and return the application logger.

    Child loggers created with ``logging.getLogger(__name__)`` inside the
    ``app`` package propagate here, so this only has to run once at startup.
    """
    log = logging.getLogger(name)
    log.setLevel(level.upper() if isinstance(level, str) else level)
    if log.handlers:
        return log

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)
    return log
