"""Router: the single entry point for sending a prompt to a provider."""

from __future__ import annotations

import logging
from collections.abc import Callable

from prin_search.config import PrinConfig
from prin_search.observability.logging import configure_logging
from prin_search.observability.tracing import configure_tracing, traced_dispatch
from prin_search.providers.base import LLMProvider
from prin_search.registry import build_provider
from prin_search.types import LLMResponse, Provider, Request

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Provider, PrinConfig], LLMProvider]


class Router:
    """Dispatch prompts to providers by key.

    Credentials come from the injected config; the router never reads the
    environment itself.

    Usage:
        # Load PRIN_* settings and API keys from the environment
        router = Router()

        # Or with explicit config
        router = Router(config=PrinConfig(anthropic_api_key="sk-ant-..."))

        # Or with an injected provider factory (for testing)
        router = Router(provider_factory=lambda provider, config: fake)

        text = await router.dispatch("claude", "Write a haiku")
    """

    def __init__(
        self,
        config: PrinConfig | None = None,
        provider_factory: ProviderFactory | None = None,
    ) -> None:
        self._config = config or PrinConfig()
        self._provider_factory = provider_factory or build_provider

        configure_logging(
            level=self._config.log_level,
            fmt=self._config.log_format,
        )
        if self._config.trace_enabled:
            configure_tracing(
                exporter=self._config.trace_exporter,
                endpoint=self._config.trace_endpoint,
                service_name=self._config.trace_service_name,
            )

    @property
    def config(self) -> PrinConfig:
        return self._config

    async def complete(
        self,
        provider_key: str | None,
        prompt: str,
        model: str | None = None,
    ) -> LLMResponse:
        """Send *prompt* to the provider named by *provider_key*.

        Args:
            provider_key: Provider name, case-insensitive. Unknown keys and
                ``chatgpt`` resolve to OpenAI.
            prompt: Prompt text, forwarded unmodified.
            model: Model override. ``None`` uses the provider's default.

        Returns:
            LLMResponse with the normalized reply text.

        Raises:
            MissingCredentialError: If the provider's API key is not set.
                Raised before any network call.
            ProviderInitError: If the provider client cannot be built.
            MalformedResponseError: In strict mode, if the reply has no text.
            Exception: Transport errors from the SDK, unchanged.
        """
        request = Request(provider=Provider.parse(provider_key), prompt=prompt, model=model)
        effective_model = request.resolved_model

        client = self._provider_factory(request.provider, self._config)
        try:
            async with traced_dispatch(request.provider.value, effective_model) as span_data:
                response = await client.complete(request.prompt, effective_model)
                span_data["response"] = response
        finally:
            await client.close()

        logger.info(
            "LLM call completed",
            extra={
                "provider": response.provider,
                "model": response.model,
                "latency_ms": round(response.latency_ms, 1),
                "response_chars": len(response.content),
            },
        )
        return response

    async def dispatch(
        self,
        provider_key: str | None,
        prompt: str,
        model: str | None = None,
    ) -> str:
        """Send *prompt* and return only the reply text."""
        response = await self.complete(provider_key, prompt, model)
        return response.content
