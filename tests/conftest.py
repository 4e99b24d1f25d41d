"""Pytest configuration and fixtures shared across all test modules.

Environment variables are seeded before any import that builds the global
settings object.
"""

import copy
import os
from typing import Any

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LLM_PROVIDER", "gemini")
os.environ.setdefault("LLM_MODEL", "gemini-test-model")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("LOG_FORMAT", "plain")

import pytest
from pydantic import BaseModel

from resume_auditor.adapters.llm.base import AbstractLLMClient


_ASSESSMENT_BEFORE = {
    "scores": {
        "ats_structure": 40,
        "keyword_match": 35,
        "experience_impact": 30,
        "formatting_readability": 55,
        "seniority_alignment": 45,
    },
    "final_ats_score": 41,
    "ats_confidence_level": 70,
    "ats_rejection_risk": "High",
}

_ASSESSMENT_AFTER = {
    "scores": {
        "ats_structure": 85,
        "keyword_match": 72,
        "experience_impact": 68,
        "formatting_readability": 90,
        "seniority_alignment": 70,
    },
    "final_ats_score": 77,
    "ats_confidence_level": 80,
    "ats_rejection_risk": "Medium",
}

ANALYSIS_PAYLOAD: dict[str, Any] = {
    "audit_findings": [
        {
            "issue": "Single-line resume",
            "why_it_is_a_problem": "No sections for the parser to anchor on",
            "ats_real_world_impact": "Experience and skills are not extracted",
            "correction_applied": "Split into uppercase sections with bullets",
        }
    ],
    "corrected_before_optimization": _ASSESSMENT_BEFORE,
    "corrected_optimized_resume": {
        "plain_text": "JOHN DOE\n\nPROFESSIONAL SUMMARY\nSoftware Engineer with 2 years of JavaScript.",
        "sections": {
            "summary": "Software Engineer with 2 years of JavaScript.",
            "experience": "- Built web features in JavaScript",
            "skills": "JavaScript",
            "education": "Not provided",
        },
    },
    "corrected_after_optimization": _ASSESSMENT_AFTER,
    "credibility_verdict": {
        "score_change_rationale": "Structure and clarity improved; no achievements invented",
        "trust_level": "Medium",
        "enterprise_readiness": "Needs quantified results",
    },
}


class FakeLLMClient(AbstractLLMClient):
    """Capturing stand-in for a provider adapter."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.model = "fake-model"
        self.calls: list[dict[str, Any]] = []

    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        schema: type[BaseModel] | None = None,
        **kwargs: Any,
    ) -> str:
        self.calls.append(
            {
                "prompt": prompt,
                "system_instruction": system_instruction,
                "schema": schema,
                **kwargs,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def analysis_payload() -> dict[str, Any]:
    """A minimal, complete AnalysisResult as plain JSON data."""
    return copy.deepcopy(ANALYSIS_PAYLOAD)


@pytest.fixture
def fake_llm_factory() -> type[FakeLLMClient]:
    """Return the FakeLLMClient class so tests can build configured stubs."""
    return FakeLLMClient
