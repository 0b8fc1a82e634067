"""Testing utilities shipped with prin-search.

Provides ``FakeProvider`` so test suites can drive a ``Router`` without
network access or API keys.

Usage::

    from prin_search import Router
    from prin_search.testing import FakeProvider

    fake = FakeProvider(default="42")
    router = Router(provider_factory=fake.factory)

    assert await router.dispatch("openai", "What is 6*7?") == "42"
    assert fake.calls[0].model == "gpt-4o-mini"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prin_search.types import LLMResponse, Provider

if TYPE_CHECKING:
    from prin_search.config import PrinConfig


@dataclass
class FakeCall:
    """Record of a single ``FakeProvider.complete()`` invocation."""

    provider: str
    prompt: str
    model: str


class FakeProvider:
    """Fake provider client. Implements the ``LLMProvider`` Protocol.

    Reply resolution in ``complete()``:

    1. A queued reply from ``set_response()`` (first in, first out)
    2. ``response_factory(prompt, model)`` if given
    3. ``default``

    A queued ``Exception`` instance is raised instead of returned.
    """

    def __init__(
        self,
        default: str = "",
        response_factory: Callable[[str, str], str] | None = None,
    ) -> None:
        self._default = default
        self._response_factory = response_factory
        self._queue: list[str | Exception] = []
        self._provider = "fake"
        self.calls: list[FakeCall] = []
        self.built_for: list[Provider] = []
        self.close_count = 0

    def set_response(self, response: str | Exception) -> None:
        """Queue a reply (or an exception to raise) for the next call."""
        self._queue.append(response)

    def factory(self, provider: Provider, config: PrinConfig) -> FakeProvider:
        """Provider factory for ``Router(provider_factory=...)``."""
        self.built_for.append(provider)
        self._provider = provider.value
        return self

    async def complete(self, prompt: str, model: str) -> LLMResponse:
        """Return the next configured reply."""
        self.calls.append(FakeCall(provider=self._provider, prompt=prompt, model=model))

        if self._queue:
            reply = self._queue.pop(0)
            if isinstance(reply, Exception):
                raise reply
        elif self._response_factory is not None:
            reply = self._response_factory(prompt, model)
        else:
            reply = self._default

        return LLMResponse(content=reply, model=model, provider=self._provider)

    @property
    def call_count(self) -> int:
        """Number of ``complete()`` calls recorded."""
        return len(self.calls)

    async def close(self) -> None:
        self.close_count += 1
