"""Factory for creating LLM client instances from injected settings."""

from resume_auditor.adapters.llm.base import AbstractLLMClient
from resume_auditor.adapters.llm.gemini_client import GeminiClient
from resume_auditor.adapters.llm.openai_client import OpenAIClient
from resume_auditor.core.config import LLMSettings
from resume_auditor.core.errors import ConfigurationAppError

_PROVIDERS: dict[str, type[AbstractLLMClient]] = {
    "gemini": GeminiClient,
    "openai": OpenAIClient,
}


def create_llm_client(llm_settings: LLMSettings) -> AbstractLLMClient:
    """Instantiate the configured LLM client.

    Called once per request so a missing credential surfaces as a
    per-request configuration error instead of a startup crash.

    Args:
        llm_settings: Provider configuration.

    Returns:
        AbstractLLMClient: Configured LLM client instance.

    Raises:
        ConfigurationAppError: If the provider is unknown or its API key is missing.
    """
    provider = llm_settings.provider.lower()
    client_cls = _PROVIDERS.get(provider)

    if client_cls is None:
        raise ConfigurationAppError(
            code="llm_unknown_provider",
            message=(
                f"Unknown LLM provider: '{provider}'. "
                f"Supported providers: {', '.join(sorted(_PROVIDERS))}"
            ),
        )

    if not llm_settings.api_key:
        key_name = "GEMINI_API_KEY" if provider == "gemini" else "LLM_API_KEY"
        raise ConfigurationAppError(
            code="llm_missing_api_key",
            message=f"{key_name} not configured",
            details={"provider": provider},
        )

    return client_cls(
        api_key=llm_settings.api_key,
        model=llm_settings.model,
        base_url=llm_settings.base_url,
        timeout_seconds=llm_settings.timeout_seconds,
    )
