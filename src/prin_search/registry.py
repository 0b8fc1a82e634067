"""Provider registry: maps each Provider to its defaults and client factory."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prin_search.exceptions import ProviderInitError
from prin_search.types import Provider

if TYPE_CHECKING:
    from prin_search.config import PrinConfig
    from prin_search.providers.base import LLMProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[["ProviderSpec", str, "PrinConfig"], "LLMProvider"]


@dataclass(frozen=True)
class ProviderSpec:
    """Static description of one provider."""

    provider: Provider
    default_model: str
    factory: ProviderFactory
    base_url: str | None = None


# ── Factories ───────────────────────────────────────────────────
# SDK imports are deferred so that only the selected vendor's SDK is loaded.


def _openai_compatible(spec: ProviderSpec, api_key: str, config: "PrinConfig") -> "LLMProvider":
    from prin_search.providers.openai_compat import OpenAICompatibleProvider

    return OpenAICompatibleProvider(
        name=spec.provider.value,
        api_key=api_key,
        base_url=spec.base_url,
        timeout_seconds=config.timeout_seconds,
        strict=config.strict_responses,
    )


def _gemini(spec: ProviderSpec, api_key: str, config: "PrinConfig") -> "LLMProvider":
    from prin_search.providers.gemini import GeminiProvider

    return GeminiProvider(
        api_key=api_key,
        timeout_seconds=config.timeout_seconds,
        strict=config.strict_responses,
    )


def _claude(spec: ProviderSpec, api_key: str, config: "PrinConfig") -> "LLMProvider":
    from prin_search.providers.claude import ClaudeProvider

    return ClaudeProvider(
        api_key=api_key,
        base_url=spec.base_url,
        timeout_seconds=config.timeout_seconds,
        strict=config.strict_responses,
    )


PROVIDER_SPECS: dict[Provider, ProviderSpec] = {
    Provider.OPENAI: ProviderSpec(Provider.OPENAI, "gpt-4o-mini", _openai_compatible),
    Provider.GEMINI: ProviderSpec(Provider.GEMINI, "gemini-1.5-flash", _gemini),
    Provider.CLAUDE: ProviderSpec(Provider.CLAUDE, "claude-3-5-sonnet-20240620", _claude),
    Provider.PERPLEXITY: ProviderSpec(
        Provider.PERPLEXITY,
        "sonar-pro",
        _openai_compatible,
        base_url="https://api.perplexity.ai",
    ),
    Provider.DEEPSEEK: ProviderSpec(
        Provider.DEEPSEEK,
        "deepseek-chat",
        _openai_compatible,
        base_url="https://api.deepseek.com/v1",
    ),
    Provider.GROK: ProviderSpec(
        Provider.GROK,
        "grok-2-latest",
        _openai_compatible,
        base_url="https://api.x.ai/v1",
    ),
}

_unregistered = set(Provider) - set(PROVIDER_SPECS)
if _unregistered:
    raise RuntimeError(f"Providers without a registry entry: {sorted(p.value for p in _unregistered)}")


def get_spec(provider: Provider) -> ProviderSpec:
    """Return the registry entry for *provider*."""
    return PROVIDER_SPECS[provider]


def default_model(provider: Provider) -> str:
    """Return the model used for *provider* when no override is given."""
    return PROVIDER_SPECS[provider].default_model


def list_providers() -> list[str]:
    """Return the canonical names of all providers."""
    return [p.value for p in PROVIDER_SPECS]


def build_provider(provider: Provider, config: "PrinConfig") -> "LLMProvider":
    """Build a provider client from configuration.

    The API key is resolved first, so a missing credential fails before any
    SDK client exists and before any network I/O.

    Args:
        provider: Which provider to build.
        config: Loaded configuration holding the credentials.

    Returns:
        An initialized LLMProvider instance.

    Raises:
        MissingCredentialError: If the provider's API key is not configured.
        ProviderInitError: If the SDK client cannot be constructed.
    """
    spec = PROVIDER_SPECS[provider]
    api_key = config.get_api_key(provider)

    try:
        client = spec.factory(spec, api_key, config)
    except Exception as exc:
        raise ProviderInitError(provider.value, str(exc)) from exc

    logger.debug("Built LLM provider: %s", provider.value)
    return client
