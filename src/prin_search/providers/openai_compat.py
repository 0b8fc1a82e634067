"""OpenAI-compatible provider: wraps AsyncOpenAI chat completions.

OpenAI itself, Perplexity, DeepSeek and xAI Grok all speak the same
chat-completion schema; they differ only in base URL and API key.
"""

from __future__ import annotations

import time
from typing import Any

from openai import AsyncOpenAI

from prin_search.normalize import openai_text
from prin_search.providers.base import build_messages
from prin_search.types import LLMResponse


class OpenAICompatibleProvider:
    """LLM provider backed by any OpenAI-compatible chat-completion API."""

    def __init__(
        self,
        name: str,
        api_key: str,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        strict: bool = False,
    ) -> None:
        self.name = name
        kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if base_url:
            kwargs["base_url"] = base_url
        if timeout_seconds is not None:
            kwargs["timeout"] = float(timeout_seconds)
        self._client = AsyncOpenAI(**kwargs)
        self._strict = strict

    async def complete(self, prompt: str, model: str) -> LLMResponse:
        """Call ``chat.completions.create`` with a single user message."""
        start = time.monotonic()
        result = await self._client.chat.completions.create(
            model=model,
            messages=build_messages(prompt),
        )
        latency_ms = (time.monotonic() - start) * 1000

        return LLMResponse(
            content=openai_text(result, strict=self._strict, provider=self.name),
            model=model,
            provider=self.name,
            latency_ms=latency_ms,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()
