"""Application-level exception types.

This module defines domain errors used across services/adapters, enabling
consistent error handling, logging, and API responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict

# Stable code returned to clients for any upstream model failure
GEMINI_BACKEND_ERROR = "GEMINI_BACKEND_ERROR"


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability.

    Details are logged but never serialized into HTTP responses.
    """

    code: str
    message: str
    hint: str
    http_status: int
    model: str
    provider: str
    input_chars: int
    request_id: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when request input is missing or malformed."""


class ConfigurationAppError(AppError):
    """Raised when server-side configuration (e.g. the LLM credential) is missing."""


class LLMAppError(AppError):
    """Raised when LLM provider/client operations fail."""
