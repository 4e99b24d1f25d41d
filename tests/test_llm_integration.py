"""Integration tests for the LLM adapter layer."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from resume_auditor.adapters.llm import GeminiClient, OpenAIClient, create_llm_client
from resume_auditor.adapters.llm.gemini_client import resolve_response_text
from resume_auditor.core.config import LLMSettings
from resume_auditor.core.errors import ConfigurationAppError
from resume_auditor.schemas.analysis import AnalysisResult


def _llm_settings(**overrides) -> LLMSettings:
    base = LLMSettings()
    return base.model_copy(update=overrides)


class TestResolveResponseText:
    @pytest.mark.asyncio
    async def test_plain_string(self) -> None:
        assert await resolve_response_text(SimpleNamespace(text='{"a": 1}')) == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_sync_callable(self) -> None:
        response = SimpleNamespace(text=lambda: '{"a": 1}')

        assert await resolve_response_text(response) == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_async_callable(self) -> None:
        response = SimpleNamespace(text=AsyncMock(return_value='{"a": 1}'))

        assert await resolve_response_text(response) == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_missing_or_non_string_text(self) -> None:
        assert await resolve_response_text(SimpleNamespace()) is None
        assert await resolve_response_text(SimpleNamespace(text=None)) is None
        assert await resolve_response_text(SimpleNamespace(text=123)) is None


class TestGeminiClientIntegration:
    """Gemini adapter with the SDK call patched out."""

    @pytest.mark.asyncio
    async def test_generate_text_success(self) -> None:
        client = GeminiClient(api_key="test-key", model="gemini-test-model")
        mock_response = SimpleNamespace(text='```json\n{"ok": true}\n```')

        with patch.object(
            client.client.aio.models,
            "generate_content",
            new_callable=AsyncMock,
            return_value=mock_response,
        ) as mock_generate:
            text = await client.generate_text(
                "RESUME TO AUDIT",
                system_instruction="Be an auditor",
                schema=AnalysisResult,
                temperature=0.2,
            )

        # Fences are left for the service to strip
        assert text == '```json\n{"ok": true}\n```'
        kwargs = mock_generate.call_args.kwargs
        assert kwargs["model"] == "gemini-test-model"
        assert kwargs["contents"] == "RESUME TO AUDIT"
        config = kwargs["config"]
        assert config.temperature == pytest.approx(0.2)
        assert config.response_mime_type == "application/json"
        assert config.system_instruction == "Be an auditor"
        assert config.response_schema is not None

    @pytest.mark.asyncio
    async def test_generate_text_empty_response_returns_empty_string(self) -> None:
        client = GeminiClient(api_key="test-key", model="gemini-test-model")

        with patch.object(
            client.client.aio.models,
            "generate_content",
            new_callable=AsyncMock,
            return_value=SimpleNamespace(text=None),
        ):
            assert await client.generate_text("prompt") == ""

    @pytest.mark.asyncio
    async def test_generate_text_api_error_raises_runtime_error(self) -> None:
        client = GeminiClient(api_key="test-key", model="gemini-test-model")

        with patch.object(
            client.client.aio.models,
            "generate_content",
            new_callable=AsyncMock,
            side_effect=ConnectionError("connection reset"),
        ):
            with pytest.raises(RuntimeError, match="Gemini API error: connection reset"):
                await client.generate_text("prompt")


class TestOpenAIClientIntegration:
    @pytest.mark.asyncio
    async def test_generate_text_uses_system_instruction_and_json_mode(self) -> None:
        mock_response = MagicMock()
        mock_response.choices = [MagicMock(message=MagicMock(content='{"result": "ok"}'))]

        client = OpenAIClient(api_key="test-key", model="gpt-4o")

        with patch.object(
            client.client.chat.completions,
            "create",
            new_callable=AsyncMock,
            return_value=mock_response,
        ) as mock_create:
            text = await client.generate_text(
                "Audit this",
                system_instruction="Be an auditor",
                schema=AnalysisResult,
                temperature=0.1,
            )

        assert text == '{"result": "ok"}'
        call_kwargs = mock_create.call_args.kwargs
        assert call_kwargs["response_format"] == {"type": "json_object"}
        assert call_kwargs["temperature"] == 0.1
        assert call_kwargs["messages"][0] == {"role": "system", "content": "Be an auditor"}
        assert call_kwargs["messages"][1] == {"role": "user", "content": "Audit this"}

    @pytest.mark.asyncio
    async def test_generate_text_api_error_raises_runtime_error(self) -> None:
        client = OpenAIClient(api_key="test-key", model="gpt-4o")

        with patch.object(
            client.client.chat.completions,
            "create",
            new_callable=AsyncMock,
            side_effect=ValueError("boom"),
        ):
            with pytest.raises(RuntimeError, match="OpenAI API error"):
                await client.generate_text("Test")


class TestLLMFactory:
    def test_creates_gemini_client_by_default(self) -> None:
        client = create_llm_client(_llm_settings(provider="gemini", api_key="k", model="gemini-x"))

        assert isinstance(client, GeminiClient)
        assert client.model == "gemini-x"

    def test_creates_openai_client(self) -> None:
        client = create_llm_client(_llm_settings(provider="OpenAI", api_key="k", model="gpt-4o-mini"))

        assert isinstance(client, OpenAIClient)
        assert client.model == "gpt-4o-mini"

    def test_missing_api_key_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationAppError, match="GEMINI_API_KEY not configured") as exc:
            create_llm_client(_llm_settings(provider="gemini", api_key=None))

        assert exc.value.code == "llm_missing_api_key"

    def test_unknown_provider_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationAppError, match="Unknown LLM provider") as exc:
            create_llm_client(_llm_settings(provider="unknown-provider", api_key="k"))

        assert exc.value.code == "llm_unknown_provider"
