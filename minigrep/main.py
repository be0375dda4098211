#!/usr/bin/env python3
import logging
import sys

from . import config
from .logger import setup_logger
from .matcher import match_pattern

logger = logging.getLogger(__name__)


def read_line(stream):
    """Read one line of input, dropping the trailing newline if configured to."""
    line = stream.readline()
    if config.STRIP_NEWLINE and line.endswith("\n"):
        line = line[:-1]
    return line


def main(argv=None):
    setup_logger()
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 2 or argv[0] != config.MODE_FLAG:
        print(config.USAGE)
        return config.EXIT_NO_MATCH

    pattern = argv[1]
    input_line = read_line(sys.stdin)
    logger.info(f"Matching {pattern!r} against {input_line!r}")

    if match_pattern(input_line, pattern):
        return config.EXIT_MATCH
    return config.EXIT_NO_MATCH


if __name__ == "__main__":
    sys.exit(main())
