"""
Logging for mdpress modules.

Every module asks for its logger through `get_logger(__name__)`. The level
comes from `MDPRESS_LOG_LEVEL` (WARNING when unset) so rendering stays quiet
unless asked otherwise. Records go to stderr, `mdpress render` writes its
HTML to stdout.

"""

import logging
import os
import sys

LOG_LEVEL_ENV = "MDPRESS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | None) -> int:
    """Map a level name to its numeric value. Unknown names mean INFO."""
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    numeric_level = getattr(logging, name, None)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """
    Attach the mdpress stderr handler to the logger called `name`.

    An explicit `level` wins over the environment. Loggers that already carry
    a handler are returned as they are, and none of them propagate to the
    root logger.

    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    numeric_level = resolve_level(level)
    logger.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    return setup_logger(name)
