#!/usr/bin/env python3
"""
Command-line runner for Jasic scripts (.jas)
"""
import locale
import logging
import os
import sys

from errors import JasicError, LoadError
from interpreter import interpret

USAGE = (
    "Usage: jasic <script>\n"
    "Where <script> is a relative path to a .jas script to run."
)

def log_level_from_env(default="WARNING"):
    """Reads JASIC_LOG_LEVEL, falling back to `default` for unknown level names."""
    level = logging.getLevelName(os.environ.get("JASIC_LOG_LEVEL", default).upper())
    return level if isinstance(level, int) else logging.getLevelName(default)

def load_source(path):
    """Reads the whole script using the platform default encoding."""
    try:
        with open(path, encoding=locale.getpreferredencoding(False)) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not load script '{path}': {e}") from e

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print(USAGE)
        return 0

    logging.basicConfig(level=log_level_from_env(), format="%(levelname)s %(name)s: %(message)s")

    try:
        source = load_source(args[0])
        interpret(source)
    except JasicError as e:
        sys.stdout.flush()
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
