# =============================================================================
# georules_logger/exceptions.py - Logger Errors
# =============================================================================
# Errors raised while configuring the logger.
# Messages follow the rule: "Errors should tell HOW to fix, not just WHAT failed."
#
# Tinting and color generation never raise; only configuration can fail.
# =============================================================================

from typing import Any


class LoggerError(Exception):
    """
    Base error class for georules_logger.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "LOGGER_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


class InvalidLogLevelError(LoggerError, ValueError):
    """
    Raised when LOG_LEVEL (or an explicit level) is not a known level name.

    Also a ValueError, so pydantic validators report it as a validation error.
    """

    def __init__(self, level: str, allowed: list[str]):
        super().__init__(
            message=f"Unknown log level: {level!r}",
            code="INVALID_LOG_LEVEL",
            suggestion=f"Use one of: {', '.join(allowed)}",
            details={"level": level, "allowed_levels": allowed},
        )
