"""Core data types for prin-search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, TypedDict


class Provider(str, Enum):
    """Closed set of hosted LLM services prin-search can talk to."""

    OPENAI = "openai"
    GEMINI = "gemini"
    CLAUDE = "claude"
    PERPLEXITY = "perplexity"
    DEEPSEEK = "deepseek"
    GROK = "grok"

    @classmethod
    def parse(cls, key: str | None) -> Provider:
        """Resolve a user-supplied provider key.

        Matching is exact apart from case. ``chatgpt`` is an alias for OpenAI, and
        anything unrecognised (including an empty key) falls back to OpenAI.
        """
        normalized = (key or "").lower()
        if normalized == "chatgpt":
            return cls.OPENAI
        try:
            return cls(normalized)
        except ValueError:
            return cls.OPENAI


# Keys accepted on the command line, aliases included.
PROVIDER_KEYS: tuple[str, ...] = (*(p.value for p in Provider), "chatgpt")


@dataclass(frozen=True)
class Request:
    """A single prompt addressed to one provider."""

    provider: Provider
    prompt: str
    model: str | None = None

    @property
    def resolved_model(self) -> str:
        """The explicit model, or the provider's default when none was given."""
        from prin_search.registry import default_model

        return self.model or default_model(self.provider)


@dataclass
class LLMResponse:
    """Normalized reply from any provider."""

    content: str
    model: str
    provider: str
    latency_ms: float = 0.0
    metadata: dict[str, object] = field(default_factory=dict)


class LLMMessage(TypedDict, total=False):
    """A single chat message.

    Compatible with Anthropic and OpenAI message formats.
    """

    role: Literal["user", "assistant", "system"]
    content: str
