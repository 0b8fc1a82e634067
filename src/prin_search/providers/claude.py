"""Claude provider: wraps AsyncAnthropic message creation."""

from __future__ import annotations

import time
from typing import Any

from anthropic import AsyncAnthropic

from prin_search.normalize import claude_text
from prin_search.providers.base import build_messages
from prin_search.types import LLMResponse

# The Messages API requires an explicit output ceiling.
MAX_TOKENS = 1024


class ClaudeProvider:
    """LLM provider backed by the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        strict: bool = False,
    ) -> None:
        kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if base_url:
            kwargs["base_url"] = base_url
        if timeout_seconds is not None:
            kwargs["timeout"] = float(timeout_seconds)
        self._client = AsyncAnthropic(**kwargs)
        self._strict = strict

    async def complete(self, prompt: str, model: str) -> LLMResponse:
        """Call ``messages.create`` and join the returned text blocks."""
        start = time.monotonic()
        result = await self._client.messages.create(
            model=model,
            max_tokens=MAX_TOKENS,
            messages=build_messages(prompt),
        )
        latency_ms = (time.monotonic() - start) * 1000

        return LLMResponse(
            content=claude_text(getattr(result, "content", None), strict=self._strict),
            model=model,
            provider="claude",
            latency_ms=latency_ms,
            metadata={"stop_reason": getattr(result, "stop_reason", None)},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()
