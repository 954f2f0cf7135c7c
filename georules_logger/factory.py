# =============================================================================
# georules_logger/factory.py - Logger Factory
# =============================================================================
# Builds the application logger from LoggerSettings:
#
#   development / test / staging -> PrettyFormatter + TintedStreamHandler
#   production                   -> JsonFormatter + StreamHandler (JSON lines)
#
# Usage:
#   from georules_logger import logger
#   logger.info("Request completed.", extra={"event": "http.response", "status": 200})
# =============================================================================

import logging
import sys
from functools import lru_cache
from typing import TextIO

from georules_logger.colors import HueScheduler
from georules_logger.config import LoggerSettings, get_settings
from georules_logger.formatters import JsonFormatter, PrettyFormatter
from georules_logger.handlers import TintedStreamHandler

DEFAULT_LOGGER_NAME = "georules"


def create_logger(
    settings: LoggerSettings | None = None,
    *,
    stream: TextIO | None = None,
    scheduler: HueScheduler | None = None,
    name: str = DEFAULT_LOGGER_NAME,
) -> logging.Logger:
    """
    Configure and return a logger.

    Existing handlers on the named logger are replaced, so calling this again
    reconfigures rather than duplicates output.

    Args:
        settings: Logger settings (defaults to the cached environment settings)
        stream: Output stream (defaults to stdout)
        scheduler: Color scheduler for pretty output
        name: Logger name

    Returns:
        The configured logging.Logger
    """
    settings = settings or get_settings()

    logger = logging.getLogger(name)
    logger.setLevel(settings.level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if settings.pretty_enabled:
        handler: logging.Handler = TintedStreamHandler(stream, scheduler)
        handler.setFormatter(
            PrettyFormatter(colorize=settings.LOG_COLORIZE, ignore=settings.ignore_list)
        )
    else:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    logger.debug(
        "Logger configured.",
        extra={"log_level": settings.LOG_LEVEL, "pretty": settings.pretty_enabled},
    )
    return logger


@lru_cache
def get_logger() -> logging.Logger:
    """Process-wide logger, built once from the environment."""
    return create_logger()
