from __future__ import annotations

import logging
from typing import Protocol

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class TextGenerationError(RuntimeError):
    """Raised when the language model call fails or returns no text."""


class TextGenerator(Protocol):
    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str: ...


class OpenAITextGenerator:
    """Plain-text completions through the OpenAI responses API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        max_input_chars: int = 12000,
    ) -> None:
        self._client = AsyncOpenAI(api_key=api_key)
        self._model = model
        self._max_input_chars = max_input_chars

    def _truncate(self, text: str) -> str:
        if len(text) <= self._max_input_chars:
            return text
        logger.debug("Truncating prompt from %s to %s chars", len(text), self._max_input_chars)
        return text[: self._max_input_chars].rstrip()

    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        try:
            response = await self._client.responses.create(
                model=self._model,
                input=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": self._truncate(user_prompt)},
                ],
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            )
        except Exception as exc:  # noqa: BLE001 - surface OpenAI errors as generation failures
            raise TextGenerationError("OpenAI request failed.") from exc

        content = getattr(response, "output_text", None)
        if not content or not content.strip():
            raise TextGenerationError("OpenAI returned empty response.")

        return content.strip()
