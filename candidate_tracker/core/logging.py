"""Logging setup for the API process.

One stdout handler on the root logger, a pipe-separated line format, and
chatty third-party loggers held at WARNING.  Called from the app lifespan.
"""

import logging
import sys

from candidate_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str | None = None) -> int:
    """Install the stdout handler and return the effective root level.

    *level* overrides ``settings.LOG_LEVEL``; unknown names fall back to INFO.
    Any handlers already on the root logger are replaced.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return log_level
