from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class AbstractLLMClient(ABC):
	"""Interface for LLM clients that produce JSON text constrained by a schema."""

	model: str

	@abstractmethod
	async def generate_text(
		self,
		prompt: str,
		*,
		system_instruction: str | None = None,
		schema: type[BaseModel] | None = None,
		**kwargs: Any,
	) -> str:
		"""Run a single generation and return the raw response text.

		Implementations resolve provider-specific accessors (immediate or
		deferred) to a plain string; parsing is left to the caller.

		Args:
			prompt: Per-request user payload.
			system_instruction: Fixed behavioral policy for the model.
			schema: Optional response schema requested from the provider.
			**kwargs: Provider-specific options (e.g., temperature).

		Returns:
			str: Response text, possibly empty.

		Raises:
			RuntimeError: If the provider call fails.
		"""
		...
