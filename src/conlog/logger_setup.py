# logger_setup.py
"""Diagnostics about conlog itself: adapter, sink and settings failures.

Written to stderr so a broken console sink never feeds back into itself.
"""

import logging
import os
import sys


def _internal_level() -> int:
    level = getattr(logging, os.getenv("CONLOG_INTERNAL_LOG_LEVEL", "WARNING").upper(), None)
    return level if isinstance(level, int) else logging.WARNING


logger = logging.getLogger("conlog")
logger.setLevel(_internal_level())

if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s conlog [%(levelname)s] %(message)s'))
    logger.addHandler(handler)
