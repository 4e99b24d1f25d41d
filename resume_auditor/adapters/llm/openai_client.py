"""OpenAI LLM client adapter."""

from typing import Any

from openai import AsyncOpenAI
from pydantic import BaseModel

from resume_auditor.adapters.llm.base import AbstractLLMClient


class OpenAIClient(AbstractLLMClient):
    """Client for calling OpenAI chat completions in JSON mode.

    Uses the official OpenAI Python SDK with async support.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
    ) -> None:
        """Initialize OpenAI async client.

        Args:
            api_key: OpenAI API key for authentication.
            model: Model name (e.g., "gpt-4o", "gpt-4o-mini").
            base_url: Optional custom base URL for OpenAI API.
            timeout_seconds: Timeout for requests in seconds.
        """
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model

    async def generate_text(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        schema: type[BaseModel] | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate JSON text using OpenAI chat completions.

        Args:
            prompt: User prompt to send to the model.
            system_instruction: System message content.
            schema: When provided, enables ``json_object`` response format.
            **kwargs: Provider options (temperature, max_tokens, top_p, seed).

        Returns:
            str: Message content ("" when the model returned none).

        Raises:
            RuntimeError: If the API call fails.
        """
        messages = [
            {
                "role": "system",
                "content": system_instruction
                or "Output JSON only. No extra text or markdown formatting.",
            },
            {"role": "user", "content": prompt},
        ]

        request_params: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": kwargs.pop("temperature", 0.2),
        }

        if schema is not None:
            request_params["response_format"] = {"type": "json_object"}

        for param in ("max_tokens", "top_p", "seed"):
            if param in kwargs:
                request_params[param] = kwargs[param]

        try:
            response = await self.client.chat.completions.create(**request_params)
            content = response.choices[0].message.content
        except Exception as exc:
            raise RuntimeError(f"OpenAI API error: {str(exc)}") from exc

        return content or ""
