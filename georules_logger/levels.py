# =============================================================================
# georules_logger/levels.py - Level Names
# =============================================================================
# Maps the pino level vocabulary used by LOG_LEVEL onto stdlib logging:
#
#   name     logging   pino (JSON output)
#   trace    5         10
#   debug    10        20
#   info     20        30
#   warn     30        40
#   error    40        50
#   fatal    50        60
#   silent   51        -     (nothing is emitted)
# =============================================================================

import logging

from georules_logger.exceptions import InvalidLogLevelError

TRACE = 5
SILENT = logging.CRITICAL + 1

logging.addLevelName(TRACE, "TRACE")

LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "silent": SILENT,
}

# Stdlib spellings accepted as well
_ALIASES = {
    "warning": "warn",
    "critical": "fatal",
}

# (upper bound on levelno, pino number, display label), ascending
_PINO_LEVELS = [
    (TRACE, 10, "TRACE"),
    (logging.DEBUG, 20, "DEBUG"),
    (logging.INFO, 30, "INFO"),
    (logging.WARNING, 40, "WARN"),
    (logging.ERROR, 50, "ERROR"),
]
_FATAL = (60, "FATAL")


def level_from_name(name: str) -> int:
    """
    Resolve a level name to a stdlib logging level.

    Args:
        name: Level name, case-insensitive ("info", "WARN", "critical", ...)

    Returns:
        The logging level number

    Raises:
        InvalidLogLevelError: If the name is not a known level
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in LEVELS:
        raise InvalidLogLevelError(name, list(LEVELS))
    return LEVELS[key]


def _lookup(levelno: int) -> tuple[int, str]:
    for bound, number, label in _PINO_LEVELS:
        if levelno <= bound:
            return number, label
    return _FATAL


def pino_level(levelno: int) -> int:
    """Numeric pino level for a logging level (used in JSON lines)."""
    return _lookup(levelno)[0]


def level_label(levelno: int) -> str:
    """Upper-case display label for a logging level ("WARN", not "WARNING")."""
    return _lookup(levelno)[1]
