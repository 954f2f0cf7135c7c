# =============================================================================
# georules_logger/config.py - Logger Settings
# =============================================================================
# Loads logger configuration from environment variables using pydantic-settings.
#
# Usage:
#   from georules_logger.config import get_settings
#   settings = get_settings()
#   print(settings.LOG_LEVEL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from georules_logger.levels import level_from_name


class LoggerSettings(BaseSettings):
    """
    Logger settings loaded from environment variables.

    Output mode follows the environment: pretty tinted console output
    everywhere except production, where records are written as JSON lines.
    """

    # -------------------------------------------------------------------------
    # Runtime Environment
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Current environment (production switches to JSON output)"
    )

    # -------------------------------------------------------------------------
    # Output Settings
    # -------------------------------------------------------------------------

    LOG_LEVEL: str = Field(
        default="info",
        description="Minimum level: fatal, error, warn, info, debug, trace or silent"
    )

    LOG_PRETTY: bool | None = Field(
        default=None,
        description="Force pretty output on or off (unset: follow ENVIRONMENT)"
    )

    LOG_COLORIZE: bool = Field(
        default=True,
        description="Color level labels and messages in pretty output"
    )

    # Comma-separated string that gets parsed
    LOG_IGNORE: str = Field(
        default="pid,hostname",
        description="Fields left out of pretty output (comma-separated)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        # Raises InvalidLogLevelError (a ValueError) for unknown names
        level_from_name(value)
        return value.strip().lower()

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def level(self) -> int:
        """LOG_LEVEL as a stdlib logging level number."""
        return level_from_name(self.LOG_LEVEL)

    @property
    def ignore_list(self) -> list[str]:
        """
        Parse LOG_IGNORE into a list.

        Example: "pid, hostname" -> ["pid", "hostname"]
        """
        return [name.strip() for name in self.LOG_IGNORE.split(",") if name.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def pretty_enabled(self) -> bool:
        """Whether records go through the pretty, tinted console handler."""
        if self.LOG_PRETTY is not None:
            return self.LOG_PRETTY
        return not self.is_production


@lru_cache
def get_settings() -> LoggerSettings:
    """
    Get cached LoggerSettings instance.

    The environment is read and validated once per process.
    """
    return LoggerSettings()
