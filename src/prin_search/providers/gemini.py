"""Gemini provider: wraps the google-genai async client."""

from __future__ import annotations

import time

from google import genai
from google.genai import types as genai_types

from prin_search.normalize import gemini_text
from prin_search.types import LLMResponse


class GeminiProvider:
    """LLM provider backed by Google's generate-content API.

    Unlike the chat-style providers, the prompt is sent bare rather than
    wrapped in a role-tagged message.
    """

    def __init__(
        self,
        api_key: str,
        timeout_seconds: float | None = None,
        strict: bool = False,
    ) -> None:
        http_options = None
        if timeout_seconds is not None:
            # google-genai expects milliseconds
            http_options = genai_types.HttpOptions(timeout=int(timeout_seconds * 1000))
        self._client = genai.Client(api_key=api_key, http_options=http_options)
        self._strict = strict

    async def complete(self, prompt: str, model: str) -> LLMResponse:
        """Call ``models.generate_content`` with the prompt as sole content."""
        start = time.monotonic()
        result = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
        )
        latency_ms = (time.monotonic() - start) * 1000

        return LLMResponse(
            content=gemini_text(result, strict=self._strict),
            model=model,
            provider="gemini",
            latency_ms=latency_ms,
        )

    async def close(self) -> None:
        """Close the async HTTP session."""
        await self._client.aio.aclose()
