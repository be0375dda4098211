"""Logging setup for the command line"""

import logging
import sys

from .config import LOG_FORMAT, LOG_LEVEL


def setup_logger(level=None):
    """Send minigrep's diagnostics to stderr.

    Usage messages go to stdout, so logging never writes there. The level
    defaults to LOG_LEVEL; an unknown name falls back to WARNING. Calling this
    again is harmless once the root logger has a handler.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return root_logger

    level_name = (level or LOG_LEVEL).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    return root_logger
