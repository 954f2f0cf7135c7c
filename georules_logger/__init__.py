# =============================================================================
# georules_logger/ - Structured Logger
# =============================================================================
# This package provides the application logger:
# - colors.py: HueScheduler - background colors with well-separated hues
# - stream.py: TintingStream - paints each chunk with the current background
# - formatters.py: pino-pretty style and JSON line formatters
# - handlers.py: TintedStreamHandler - format, new color, tint, write
# - factory.py: create_logger / get_logger factory
# - config.py: LoggerSettings (environment driven)
# - middleware.py: FastAPI request logging
#
# Usage:
#   from georules_logger import logger
#   logger.info("Incoming request.", extra={"event": "http.request"})
# =============================================================================

from georules_logger.colors import RGB, HueScheduler, HueState, hsl_to_rgb
from georules_logger.config import LoggerSettings, get_settings
from georules_logger.exceptions import InvalidLogLevelError, LoggerError
from georules_logger.formatters import JsonFormatter, PrettyFormatter
from georules_logger.handlers import TintedStreamHandler
from georules_logger.levels import TRACE, level_from_name
from georules_logger.factory import create_logger, get_logger
from georules_logger.stream import TintingStream, tint

logger = get_logger()

__all__ = [
    # Colors
    "RGB",
    "HueScheduler",
    "HueState",
    "hsl_to_rgb",
    # Tinting
    "TintingStream",
    "tint",
    # Logging
    "JsonFormatter",
    "PrettyFormatter",
    "TintedStreamHandler",
    "TRACE",
    "level_from_name",
    "create_logger",
    "get_logger",
    "logger",
    # Config
    "LoggerSettings",
    "get_settings",
    # Errors
    "LoggerError",
    "InvalidLogLevelError",
]
