# =============================================================================
# tests/test_levels.py - Level Name Tests
# =============================================================================

import logging

import pytest

from georules_logger.exceptions import InvalidLogLevelError, LoggerError
from georules_logger.levels import (
    SILENT,
    TRACE,
    level_from_name,
    level_label,
    pino_level,
)


class TestLevelFromName:
    """Tests for level_from_name()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("trace", TRACE),
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warn", logging.WARNING),
            ("error", logging.ERROR),
            ("fatal", logging.CRITICAL),
            ("silent", SILENT),
        ],
    )
    def test_pino_names(self, name, expected):
        assert level_from_name(name) == expected

    def test_case_and_whitespace_insensitive(self):
        assert level_from_name("  WARN ") == logging.WARNING

    def test_stdlib_aliases(self):
        assert level_from_name("warning") == logging.WARNING
        assert level_from_name("critical") == logging.CRITICAL

    def test_unknown_name_raises(self):
        with pytest.raises(InvalidLogLevelError) as exc_info:
            level_from_name("loud")

        error = exc_info.value
        assert isinstance(error, LoggerError)
        assert isinstance(error, ValueError)
        assert error.code == "INVALID_LOG_LEVEL"
        assert error.details["level"] == "loud"
        assert "silent" in error.details["allowed_levels"]

    def test_silent_is_above_every_level(self):
        assert SILENT > logging.CRITICAL


class TestPinoMapping:
    """Tests for pino_level() and level_label()."""

    @pytest.mark.parametrize(
        "levelno, number, label",
        [
            (TRACE, 10, "TRACE"),
            (logging.DEBUG, 20, "DEBUG"),
            (logging.INFO, 30, "INFO"),
            (logging.WARNING, 40, "WARN"),
            (logging.ERROR, 50, "ERROR"),
            (logging.CRITICAL, 60, "FATAL"),
        ],
    )
    def test_standard_levels(self, levelno, number, label):
        assert pino_level(levelno) == number
        assert level_label(levelno) == label

    def test_custom_levels_round_up(self):
        """Levels between the named ones take the next named level."""
        assert level_label(25) == "WARN"
        assert pino_level(45) == 60

    def test_trace_registered_with_logging(self):
        assert logging.getLevelName(TRACE) == "TRACE"
