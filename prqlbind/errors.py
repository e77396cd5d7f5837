"""Custom exception hierarchy for prqlbind.

All public errors inherit from PrqlBindError so callers can catch the base
class for any prqlbind-specific failure.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from prqlbind.schema.diagnostics import Diagnostics


class PrqlBindError(Exception):
    """Base exception for all prqlbind errors."""

    code: str = "PRQLBIND_ERROR"

    def details(self) -> dict[str, Any]:
        return {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for the host caller."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details(),
        }


class ConfigurationError(PrqlBindError):
    """Raised when an option value cannot be decoded for its field.

    Args:
        field: The option name being decoded (e.g. ``"format"``).
        reason: Why decoding failed (e.g. ``"expected boolean"``).
        value: The raw host value that was rejected.
    """

    code = "CONFIGURATION_ERROR"

    def __init__(self, field: str, reason: str, value: Any = None) -> None:
        super().__init__(f"Invalid value for option '{field}': {reason}")
        self.field = field
        self.reason = reason
        self.value = value

    def details(self) -> dict[str, Any]:
        return {"field": self.field, "reason": self.reason, "value": repr(self.value)}


class CompilationError(PrqlBindError):
    """Raised when the PRQL compiler rejects the source or fails formatting.

    The message is always the single normalized line; the full diagnostics
    are kept on the instance for callers that want them.

    Args:
        message: Normalized, human-readable description.
        diagnostics: The compiler diagnostics the message was derived from.
    """

    code = "COMPILATION_ERROR"

    def __init__(self, message: str, diagnostics: Diagnostics | None = None) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics


class DiagnosticsError(PrqlBindError):
    """Raised by a compiler backend carrying the raw diagnostics.

    Internal to the backend / facade seam: the facade converts it into a
    :class:`CompilationError` after normalization.
    """

    code = "DIAGNOSTICS"

    def __init__(self, diagnostics: Diagnostics) -> None:
        super().__init__(f"{len(diagnostics.inner)} diagnostic(s)")
        self.diagnostics = diagnostics
