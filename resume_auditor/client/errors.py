"""Errors raised by the resume analysis client.

Server-reported failures carry an HTTP status; transport failures and
cancellation do not.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ClientError(Exception):
    """Base error for the analysis client."""

    code: str
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class BackendHTTPError(ClientError):
    """The service answered with a non-success status."""

    status_code: int = 0
    body: str = field(default="", repr=False)

    @classmethod
    def from_status(cls, status_code: int, body: str) -> BackendHTTPError:
        code = f"BACKEND_ERROR_{status_code}"
        return cls(code=code, message=code, status_code=status_code, body=body)


class TransportAppError(ClientError):
    """The request did not complete (connection failure, timeout)."""


class AnalysisCancelledError(ClientError):
    """The caller cancelled the request before it completed."""


class InvalidResponseError(ClientError):
    """The service returned 2xx but the body is not a valid AnalysisResult."""
