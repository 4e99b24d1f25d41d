from typing import Any

from fastapi import APIRouter, Body, Depends

from resume_auditor.adapters.llm.base import AbstractLLMClient
from resume_auditor.adapters.llm.factory import create_llm_client
from resume_auditor.core.config import Settings, get_settings
from resume_auditor.schemas.analysis import AnalysisResult
from resume_auditor.services.analysis_service import AnalysisService, parse_analyze_request

router = APIRouter(tags=["Resume"])


def get_llm_client(settings: Settings = Depends(get_settings)) -> AbstractLLMClient:
    """Build the LLM client for this request.

    Raises:
        ConfigurationAppError: If the provider credential is not configured.
    """
    return create_llm_client(settings.llm)


def get_analysis_service(
    llm: AbstractLLMClient = Depends(get_llm_client),
    settings: Settings = Depends(get_settings),
) -> AnalysisService:
    return AnalysisService(
        llm,
        max_resume_chars=settings.app.max_resume_chars,
        temperature=settings.llm.temperature,
    )


@router.post(
    "/analyze-resume",
    response_model=AnalysisResult,
    responses={
        400: {"description": "resumeText missing or not a string"},
        405: {"description": "Only POST is allowed"},
        500: {"description": "Missing credential or GEMINI_BACKEND_ERROR"},
    },
)
async def analyze_resume(
    payload: Any = Body(
        None,
        examples=[{"resumeText": "John Doe, Software Engineer, 2 years experience in JavaScript"}],
    ),
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResult:
    """Audit a resume and return the ATS analysis with a rewritten version.

    The body must be ``{"resumeText": "<text>"}``. Text beyond the configured
    limit (15,000 characters by default) is ignored.

    Returns:
        AnalysisResult: findings, before/after scores, rewritten resume and
            credibility verdict.

    Raises:
        ValidationAppError: 400 when resumeText is missing or not a string.
        ConfigurationAppError: 500 when the LLM credential is missing.
        LLMAppError: 500 GEMINI_BACKEND_ERROR on any upstream failure.
    """
    request = parse_analyze_request(payload)
    return await service.analyze(request.resume_text)
