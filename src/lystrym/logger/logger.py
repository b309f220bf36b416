"""Project logger for lystrym.

Stream listener failures under the ``ISOLATE`` policy and the creation of
derived streams are reported here. The level comes from
``settings.LOG_LEVEL`` (``LYSTRYM_LOG_LEVEL`` / ``~/.lystrym.json``).
"""

import logging
import sys

from lystrym.core.config import settings

__all__ = ["logger", "setup_logger", "HANDLER_NAME"]

# Name given to the stdout handler this module installs
HANDLER_NAME = "lystrym.stdout"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _own_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logger(
    name: str = "lystrym",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching the lystrym stdout handler once.

    Other handlers on the logger (e.g. ones added by a test runner) are left
    alone and do not count as configuration. Calling this again for an
    already configured logger changes nothing.

    Args:
        name: Logger name (typically the project name)
        level: Log level name; defaults to ``settings.LOG_LEVEL``
        format_string: Custom format string

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if _own_handler(logger) is not None:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.propagate = False
    return logger


logger = setup_logger()
