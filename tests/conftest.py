# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides seeded schedulers, buffers and log records
# =============================================================================

import io
import logging
import os
import random

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# georules_logger builds the process logger from the environment on import

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "info")

import pytest

from georules_logger.colors import HueScheduler


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so hue sequences are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scheduler(rng) -> HueScheduler:
    """Fresh scheduler with no color generated yet."""
    return HueScheduler(rng=rng)


@pytest.fixture
def buffer() -> io.StringIO:
    """In-memory downstream for handler and stream output."""
    return io.StringIO()


@pytest.fixture
def logger_name(request) -> str:
    """Logger name unique to the running test."""
    return f"tests.{request.node.name}"


@pytest.fixture
def make_record():
    """Factory for LogRecords with structured fields attached."""
    def _make(msg: str = "hello", level: int = logging.INFO, exc_info=None, **fields):
        record = logging.LogRecord("tests", level, __file__, 1, msg, (), exc_info)
        record.__dict__.update(fields)
        return record
    return _make
