# =============================================================================
# georules_logger/formatters.py - Log Formatters
# =============================================================================
# Two output styles:
#
#   PrettyFormatter - human-readable development output (pino-pretty style)
#       [2024-01-15 10:30:45.123 +0100] INFO: Incoming request.
#           event: "http.request"
#           method: "GET"
#
#   JsonFormatter - one JSON object per line for production (pino style)
#       {"level": 30, "time": 1705311045123, "pid": 4242, "hostname": "web-1",
#        "msg": "Incoming request.", "event": "http.request", "method": "GET"}
#
# Structured fields come from stdlib `extra`:
#   logger.info("Incoming request.", extra={"event": "http.request"})
# =============================================================================

import json
import logging
import socket
from datetime import datetime
from typing import Any, Iterable

from georules_logger.levels import level_label, pino_level
from georules_logger.stream import RESET

HOSTNAME = socket.gethostname()

# Attributes every LogRecord carries; anything else was passed via `extra`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

LEVEL_COLORS = {
    "TRACE": "\x1b[90m",       # gray
    "DEBUG": "\x1b[34m",       # blue
    "INFO": "\x1b[32m",        # green
    "WARN": "\x1b[33m",        # yellow
    "ERROR": "\x1b[31m",       # red
    "FATAL": "\x1b[41m",       # red background
}
MESSAGE_COLOR = "\x1b[97m"     # whiteBright

DEFAULT_IGNORE = ("pid", "hostname")


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Structured fields attached to a record through `extra`."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


def _to_json(value: Any) -> str:
    return json.dumps(value, default=str, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
    """
    Development formatter modeled on pino-pretty.

    Args:
        colorize: Wrap the level label and message in ANSI colors
        ignore: Field names left out of the output ("pid", "hostname", or any
            structured field)

    The output carries no trailing newline; line termination is left to the
    stream it is written to.
    """

    def __init__(self, colorize: bool = True, ignore: Iterable[str] = DEFAULT_IGNORE):
        super().__init__()
        self.colorize = colorize
        self.ignore = frozenset(ignore)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        # Local system time: "YYYY-MM-DD HH:MM:SS.mmm +ZZZZ"
        moment = datetime.fromtimestamp(record.created).astimezone()
        if datefmt:
            return moment.strftime(datefmt)
        return (
            moment.strftime("%Y-%m-%d %H:%M:%S")
            + f".{int(record.msecs):03d} "
            + moment.strftime("%z")
        )

    def _paint(self, text: str, color: str) -> str:
        if not self.colorize:
            return text
        return f"{color}{text}{RESET}"

    def _origin(self, record: logging.LogRecord) -> str:
        show_pid = "pid" not in self.ignore
        show_host = "hostname" not in self.ignore
        if show_pid and show_host:
            return f" ({record.process} on {HOSTNAME})"
        if show_pid:
            return f" ({record.process})"
        if show_host:
            return f" (on {HOSTNAME})"
        return ""

    def format(self, record: logging.LogRecord) -> str:
        label = level_label(record.levelno)
        header = (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"{self._paint(label, LEVEL_COLORS[label])}"
            f"{self._origin(record)}: "
            f"{self._paint(record.getMessage(), MESSAGE_COLOR)}"
        )
        lines = [header]

        for key, value in record_fields(record).items():
            if key in self.ignore:
                continue
            lines.append(f"    {key}: {_to_json(value)}")

        if record.exc_info and record.exc_info[0] is not None:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            lines.extend(f"    {line}" for line in record.exc_text.splitlines())
        if record.stack_info:
            lines.extend(f"    {line}" for line in self.formatStack(record.stack_info).splitlines())

        return "\n".join(lines)


class JsonFormatter(logging.Formatter):
    """Production formatter: one pino-compatible JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": pino_level(record.levelno),
            "time": int(record.created * 1000),
            "pid": record.process,
            "hostname": HOSTNAME,
            "msg": record.getMessage(),
        }
        # Core keys win over same-named structured fields
        for key, value in record_fields(record).items():
            payload.setdefault(key, value)

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            payload["err"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "stack": self.formatException(record.exc_info),
            }

        return _to_json(payload)

