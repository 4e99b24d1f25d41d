"""Client for the resume analysis endpoint."""

from resume_auditor.client.errors import (
    AnalysisCancelledError,
    BackendHTTPError,
    ClientError,
    InvalidResponseError,
    TransportAppError,
)
from resume_auditor.client.resume_client import ResumeAnalysisClient, analyze_resume

__all__ = [
    "AnalysisCancelledError",
    "BackendHTTPError",
    "ClientError",
    "InvalidResponseError",
    "ResumeAnalysisClient",
    "TransportAppError",
    "analyze_resume",
]
