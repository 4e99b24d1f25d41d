"""Google Gemini LLM client adapter."""

import inspect
from typing import Any

from google import genai
from google.genai import types
from pydantic import BaseModel

from resume_auditor.adapters.llm.base import AbstractLLMClient


async def resolve_response_text(response: Any) -> str | None:
    """Normalize the ``text`` accessor of a generation response.

    SDK versions expose ``text`` as a property, a method, or a coroutine;
    all of them end up here as a plain string (or None).
    """
    text = getattr(response, "text", None)
    if callable(text):
        text = text()
    if inspect.isawaitable(text):
        text = await text
    if text is not None and not isinstance(text, str):
        return None
    return text


class GeminiClient(AbstractLLMClient):
    """Client for Gemini ``generate_content`` with JSON response mode.

    Uses the official ``google-genai`` SDK through its async surface
    (``client.aio``).
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
    ) -> None:
        """Initialize the Gemini client.

        Args:
            api_key: Gemini API key.
            model: Model name (e.g., "gemini-3-flash-preview").
            base_url: Optional custom API endpoint.
            timeout_seconds: Request timeout in seconds.
        """
        http_options = types.HttpOptions(
            timeout=int(timeout_seconds * 1000),
            base_url=base_url,
        )
        self.client = genai.Client(api_key=api_key, http_options=http_options)
        self.model = model

    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        schema: type[BaseModel] | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate JSON text with Gemini.

        Args:
            prompt: User payload sent as ``contents``.
            system_instruction: Fixed system instruction.
            schema: Pydantic model used as ``response_schema``.
            **kwargs: temperature, max_output_tokens, top_p, seed.

        Returns:
            str: Raw response text ("" when the model produced nothing).

        Raises:
            RuntimeError: If the API call fails.
        """
        config_params: dict[str, Any] = {
            "temperature": kwargs.pop("temperature", 0.2),
            "response_mime_type": "application/json",
        }
        if system_instruction:
            config_params["system_instruction"] = system_instruction
        if schema is not None:
            config_params["response_schema"] = schema

        for param in ("max_output_tokens", "top_p", "seed"):
            if param in kwargs:
                config_params[param] = kwargs[param]

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(**config_params),
            )
            text = await resolve_response_text(response)
        except Exception as exc:
            raise RuntimeError(f"Gemini API error: {str(exc)}") from exc

        return text or ""
