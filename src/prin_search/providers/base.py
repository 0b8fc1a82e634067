"""LLM provider protocol: the contract every provider client must satisfy."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from prin_search.types import LLMMessage, LLMResponse


@runtime_checkable
class LLMProvider(Protocol):
    """Protocol that all provider clients implement.

    A client wraps one vendor SDK, issues exactly one request per
    ``complete()`` call and returns the normalized text in an LLMResponse.
    """

    async def complete(self, prompt: str, model: str) -> LLMResponse:
        """Send a single-turn prompt and return the reply text.

        Args:
            prompt: The user's prompt, passed through unmodified.
            model: Model identifier understood by the provider.

        Returns:
            LLMResponse whose ``content`` is the normalized reply text.
        """
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        ...


def build_messages(prompt: str) -> list[LLMMessage]:
    """Wrap *prompt* as the single user message of a chat request."""
    return [{"role": "user", "content": prompt}]
