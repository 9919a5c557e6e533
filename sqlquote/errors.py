"""Custom exception hierarchy for sqlquote.

All public errors inherit from SQLQuoteError so callers can catch the base
class for any sqlquote-specific failure.
"""
from __future__ import annotations

from typing import Any, Literal

#: Where an encode failure originated.
FailureSource = Literal["appender", "valuer", "unsupported"]


class SQLQuoteError(Exception):
    """Base exception for all sqlquote errors."""


class EncodeError(SQLQuoteError):
    """Raised when a value cannot be encoded and the failure policy is
    ``"raise"``.

    Args:
        message: Human-readable description (the delegate's own message).
        value_type: Qualified type name of the value being encoded.
        source: Which capability failed (``appender``, ``valuer`` or
            ``unsupported``).
    """

    def __init__(
        self,
        message: str,
        value_type: str,
        source: FailureSource = "appender",
    ) -> None:
        super().__init__(message)
        self.value_type = value_type
        self.source: FailureSource = source

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for logging or APIs."""
        return {
            "error": "ENCODE_FAILED",
            "message": str(self),
            "details": {"value_type": self.value_type, "source": self.source},
        }


class UnsupportedValueError(EncodeError):
    """Raised when no encoder (nor the structural fallback) accepts a value."""

    def __init__(self, message: str, value_type: str) -> None:
        super().__init__(message, value_type=value_type, source="unsupported")


class ConfigError(SQLQuoteError):
    """Raised when an EncoderConfig or a quote mode is invalid.

    Args:
        message: Human-readable description.
        field: Name of the offending setting, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
