"""Exceptions raised by the NOTAM briefing core."""

from typing import Any, Optional


class NotamBriefingError(Exception):
    """Base exception for contract errors raised by this package."""

    def __init__(self, message: str, details: Any = None):
        """
        Initialize the error.

        Args:
            message: Human readable error message
            details: Optional extra context (offending value, key, ...)
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details is not None:
            return f"{self.message} (details: {self.details})"
        return self.message


class UnknownTimeWindowError(NotamBriefingError, ValueError):
    """Raised when a time window selector is not one of 6h, 12h, 24h or All."""

    def __init__(self, value: Optional[Any]):
        super().__init__(f"Unknown time window: {value!r}")
        self.value = value


class ConfigurationError(NotamBriefingError):
    """Raised when parser settings are out of range."""
