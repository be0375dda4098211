"""Configuration constants and environment overrides"""

import os

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = "minigrep %(levelname)s %(name)s: %(message)s"

# Input handling
STRIP_NEWLINE = os.getenv("MINIGREP_STRIP_NEWLINE", "1").lower() not in ("0", "false", "no")

# Command line
MODE_FLAG = "-E"
USAGE = f"Usage: minigrep {MODE_FLAG} <pattern>"
EXIT_MATCH = 0
EXIT_NO_MATCH = 1
