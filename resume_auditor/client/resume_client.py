"""Async client for the resume analysis endpoint."""

from __future__ import annotations

import asyncio
import contextlib
import logging

import httpx
from pydantic import ValidationError

from resume_auditor.client.errors import (
    AnalysisCancelledError,
    BackendHTTPError,
    InvalidResponseError,
    TransportAppError,
)
from resume_auditor.schemas.analysis import AnalysisResult

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/analyze-resume"

# Logged error bodies are capped; the service never echoes resume text back
_MAX_LOGGED_BODY = 2000


class ResumeAnalysisClient:
    """Submits resume text to the analysis service.

    Use as an async context manager, or call :meth:`aclose` when the client
    owns its ``httpx.AsyncClient``.

    Example:
        >>> async with ResumeAnalysisClient("http://localhost:8000") as client:
        ...     result = await client.analyze(text, cancel_event=stop)
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout_seconds: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
        path: str = ANALYZE_PATH,
    ) -> None:
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout_seconds)
        self.path = path

    async def __aenter__(self) -> ResumeAnalysisClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def _post(self, resume_text: str) -> httpx.Response:
        try:
            return await self._http.post(self.path, json={"resumeText": resume_text})
        except httpx.RequestError as exc:
            raise TransportAppError(code="TRANSPORT_ERROR", message=str(exc) or type(exc).__name__) from exc

    async def _post_cancellable(self, resume_text: str, cancel_event: asyncio.Event) -> httpx.Response:
        """Race the request against ``cancel_event``.

        When the event wins, the request task is cancelled, which makes httpx
        close the in-flight connection.
        """
        if cancel_event.is_set():
            raise AnalysisCancelledError(code="ANALYSIS_CANCELLED", message="Resume analysis was cancelled")

        request_task = asyncio.ensure_future(self._post(resume_text))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await request_task

        if request_task.cancelled():
            logger.info("resume_analysis_cancelled", extra={"path": self.path})
            raise AnalysisCancelledError(code="ANALYSIS_CANCELLED", message="Resume analysis was cancelled")
        return request_task.result()

    def _decode(self, response: httpx.Response) -> AnalysisResult:
        if not response.is_success:
            body = response.text
            logger.error(
                "backend_error",
                extra={"status_code": response.status_code, "response_body": body[:_MAX_LOGGED_BODY]},
            )
            raise BackendHTTPError.from_status(response.status_code, body)

        try:
            return AnalysisResult.model_validate(response.json())
        except ValueError as exc:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            errors = exc.error_count() if isinstance(exc, ValidationError) else 0
            logger.error(
                "invalid_analysis_response",
                extra={"status_code": response.status_code, "validation_errors": errors},
            )
            raise InvalidResponseError(
                code="INVALID_ANALYSIS_RESPONSE",
                message="Service returned a body that is not a valid AnalysisResult",
            ) from exc

    async def analyze(
        self,
        resume_text: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> AnalysisResult:
        """Submit resume text and return the validated analysis.

        Args:
            resume_text: Raw resume text.
            cancel_event: Optional event; setting it aborts the request.

        Returns:
            AnalysisResult decoded and validated from the response body.

        Raises:
            BackendHTTPError: Non-2xx status (code ``BACKEND_ERROR_<status>``).
            TransportAppError: The request did not complete.
            AnalysisCancelledError: ``cancel_event`` was set before completion.
            InvalidResponseError: 2xx body is not a valid AnalysisResult.
        """
        if cancel_event is None:
            response = await self._post(resume_text)
        else:
            response = await self._post_cancellable(resume_text, cancel_event)
        return self._decode(response)


async def analyze_resume(
    resume_text: str,
    *,
    base_url: str,
    cancel_event: asyncio.Event | None = None,
    timeout_seconds: float = 60.0,
) -> AnalysisResult:
    """One-shot helper that opens a client, analyzes, and closes it."""
    async with ResumeAnalysisClient(base_url, timeout_seconds=timeout_seconds) as client:
        return await client.analyze(resume_text, cancel_event=cancel_event)
