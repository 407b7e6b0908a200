"""
Package-wide logger. Records are written to stderr by a dedicated handler and are not propagated
to the root logger, so applications embedding this package keep control of their own logging.
"""

import logging

logger = logging.getLogger("lendmath")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
logger.addHandler(_handler)


def set_log_level(level: int | str) -> None:
    logger.setLevel(level)
