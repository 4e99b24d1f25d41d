"""Resume audit service: a single schema-validated LLM call per request.

The pipeline is validate → truncate → build instruction payload → call the
model once → strip fences and parse → validate against ``AnalysisResult``.
Any failure after validation is reported as ``GEMINI_BACKEND_ERROR``; no
retry is attempted and no partial result is ever returned.
"""

import logging
from typing import Any

from pydantic import ValidationError

from resume_auditor.adapters.llm.base import AbstractLLMClient
from resume_auditor.core.errors import GEMINI_BACKEND_ERROR, LLMAppError, ValidationAppError
from resume_auditor.schemas.analysis import AnalysisResult, AnalyzeResumeRequest
from resume_auditor.services.prompts import SYSTEM_INSTRUCTION, build_user_prompt
from resume_auditor.utils.llm_output import parse_json_payload

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESUME_CHARS = 15000
RESUME_TEXT_REQUIRED = "resumeText is required as string"


def _truncate(text: str, max_chars: int) -> tuple[str, bool]:
    """Truncate text to max_chars if needed.

    Returns:
        Tuple of (truncated_text, was_truncated).
    """
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars], True


def parse_analyze_request(payload: Any) -> AnalyzeResumeRequest:
    """Validate the raw request body.

    Args:
        payload: Decoded JSON body (any shape, possibly None or bytes).

    Raises:
        ValidationAppError: If ``resumeText`` is missing, empty or not a string.
    """
    if not isinstance(payload, dict):
        raise ValidationAppError(code="invalid_resume_text", message=RESUME_TEXT_REQUIRED)
    try:
        return AnalyzeResumeRequest.model_validate(payload)
    except ValidationError as exc:
        raise ValidationAppError(
            code="invalid_resume_text",
            message=RESUME_TEXT_REQUIRED,
            details={"context": {"errors": exc.error_count()}},
        ) from exc


def _backend_error(message: str, **details: Any) -> LLMAppError:
    return LLMAppError(code=GEMINI_BACKEND_ERROR, message=message, details=details or None)


class AnalysisService:
    """Audits one resume per call using an injected LLM client.

    Attributes:
        llm: LLM client adapter returning raw JSON text.
        max_resume_chars: Input is silently cut to this many characters.
        temperature: Sampling temperature forwarded to the provider.
    """

    def __init__(
        self,
        llm: AbstractLLMClient,
        *,
        max_resume_chars: int = DEFAULT_MAX_RESUME_CHARS,
        temperature: float = 0.2,
    ) -> None:
        self.llm = llm
        self.max_resume_chars = max_resume_chars
        self.temperature = temperature

    async def _generate_raw(self, resume_text: str) -> str:
        try:
            return await self.llm.generate_text(
                build_user_prompt(resume_text),
                system_instruction=SYSTEM_INSTRUCTION,
                schema=AnalysisResult,
                temperature=self.temperature,
            )
        except Exception as exc:
            message = str(exc) or "Unknown error from Gemini API"
            raise _backend_error(message, model=getattr(self.llm, "model", "")) from exc

    def _parse_result(self, raw_text: str) -> AnalysisResult:
        """Decode and validate the model output.

        Raises:
            LLMAppError: On empty, unparseable or incomplete output.
        """
        if not raw_text or not raw_text.strip():
            raise _backend_error("EMPTY_AI_RESPONSE")

        try:
            payload = parse_json_payload(raw_text)
        except ValueError as exc:
            raise _backend_error(str(exc)) from exc

        try:
            return AnalysisResult.model_validate(payload)
        except ValidationError as exc:
            raise _backend_error(
                f"AI response does not match the analysis schema ({exc.error_count()} errors)",
            ) from exc

    async def analyze(self, resume_text: str) -> AnalysisResult:
        """Audit and rewrite a resume.

        Args:
            resume_text: Validated, non-empty resume text.

        Returns:
            AnalysisResult parsed from the model response.

        Raises:
            LLMAppError: If the model call fails or its output is unusable.
        """
        resume_text, truncated = _truncate(resume_text, self.max_resume_chars)

        logger.info(
            "resume_analysis_started",
            extra={
                "input_chars": len(resume_text),
                "input_truncated": truncated,
                "model": getattr(self.llm, "model", None),
            },
        )

        try:
            raw_text = await self._generate_raw(resume_text)
            result = self._parse_result(raw_text)
        except LLMAppError as exc:
            logger.error(
                "gemini_backend_error",
                extra={"error_message": exc.message, "error_details": exc.details or {}},
            )
            raise

        logger.info(
            "resume_analysis_completed",
            extra={
                "audit_findings": len(result.audit_findings),
                "score_before": result.corrected_before_optimization.final_ats_score,
                "score_after": result.corrected_after_optimization.final_ats_score,
            },
        )
        return result
