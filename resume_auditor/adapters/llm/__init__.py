"""LLM adapter layer - abstracts over multiple LLM providers."""

from resume_auditor.adapters.llm.base import AbstractLLMClient
from resume_auditor.adapters.llm.factory import create_llm_client
from resume_auditor.adapters.llm.gemini_client import GeminiClient
from resume_auditor.adapters.llm.openai_client import OpenAIClient

__all__ = [
    "AbstractLLMClient",
    "GeminiClient",
    "OpenAIClient",
    "create_llm_client",
]
