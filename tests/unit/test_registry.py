"""Tests for the provider registry."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from prin_search.config import PrinConfig
from prin_search.exceptions import MissingCredentialError, ProviderInitError
from prin_search.registry import (
    PROVIDER_SPECS,
    ProviderSpec,
    build_provider,
    default_model,
    get_spec,
    list_providers,
)
from prin_search.types import Provider


@pytest.mark.unit
class TestRegistry:
    def test_every_provider_registered(self) -> None:
        assert set(PROVIDER_SPECS) == set(Provider)

    @pytest.mark.parametrize(
        ("provider", "model"),
        [
            (Provider.OPENAI, "gpt-4o-mini"),
            (Provider.GEMINI, "gemini-1.5-flash"),
            (Provider.CLAUDE, "claude-3-5-sonnet-20240620"),
            (Provider.PERPLEXITY, "sonar-pro"),
            (Provider.DEEPSEEK, "deepseek-chat"),
            (Provider.GROK, "grok-2-latest"),
        ],
    )
    def test_default_models(self, provider: Provider, model: str) -> None:
        assert default_model(provider) == model

    @pytest.mark.parametrize(
        ("provider", "base_url"),
        [
            (Provider.OPENAI, None),
            (Provider.PERPLEXITY, "https://api.perplexity.ai"),
            (Provider.DEEPSEEK, "https://api.deepseek.com/v1"),
            (Provider.GROK, "https://api.x.ai/v1"),
        ],
    )
    def test_openai_compatible_base_urls(self, provider: Provider, base_url: str | None) -> None:
        assert get_spec(provider).base_url == base_url

    def test_list_providers(self) -> None:
        assert sorted(list_providers()) == sorted(p.value for p in Provider)


@pytest.mark.unit
class TestBuildProvider:
    def test_missing_credential_before_client_construction(self) -> None:
        with patch("prin_search.providers.openai_compat.AsyncOpenAI") as mock_openai:
            with pytest.raises(MissingCredentialError, match="Missing DEEPSEEK_API_KEY"):
                build_provider(Provider.DEEPSEEK, PrinConfig())
        mock_openai.assert_not_called()

    @pytest.mark.parametrize(
        ("provider", "base_url"),
        [
            (Provider.PERPLEXITY, "https://api.perplexity.ai"),
            (Provider.DEEPSEEK, "https://api.deepseek.com/v1"),
            (Provider.GROK, "https://api.x.ai/v1"),
        ],
    )
    def test_openai_compatible_client_uses_base_url_and_key(
        self, test_config: PrinConfig, provider: Provider, base_url: str
    ) -> None:
        from prin_search.providers.openai_compat import OpenAICompatibleProvider

        with patch("prin_search.providers.openai_compat.AsyncOpenAI") as mock_openai:
            client = build_provider(provider, test_config)

        assert isinstance(client, OpenAICompatibleProvider)
        assert client.name == provider.value
        kwargs = mock_openai.call_args.kwargs
        assert kwargs["base_url"] == base_url
        assert kwargs["api_key"] == test_config.get_api_key(provider)
        assert kwargs["max_retries"] == 0

    def test_openai_uses_sdk_default_base_url(self, test_config: PrinConfig) -> None:
        with patch("prin_search.providers.openai_compat.AsyncOpenAI") as mock_openai:
            build_provider(Provider.OPENAI, test_config)
        assert "base_url" not in mock_openai.call_args.kwargs
        assert mock_openai.call_args.kwargs["api_key"] == "sk-openai-test"

    def test_timeout_is_forwarded(self) -> None:
        config = PrinConfig(anthropic_api_key="sk-ant", timeout_seconds=12.5)  # type: ignore[arg-type]
        with patch("prin_search.providers.claude.AsyncAnthropic") as mock_anthropic:
            build_provider(Provider.CLAUDE, config)
        assert mock_anthropic.call_args.kwargs["timeout"] == 12.5

    def test_factory_error_raises_provider_init_error(self, test_config: PrinConfig) -> None:
        def bad_factory(spec: ProviderSpec, api_key: str, config: PrinConfig) -> None:
            raise RuntimeError("factory exploded")

        broken = ProviderSpec(Provider.GROK, "grok-2-latest", bad_factory)  # type: ignore[arg-type]
        with patch.dict(PROVIDER_SPECS, {Provider.GROK: broken}):
            with pytest.raises(ProviderInitError, match="factory exploded"):
                build_provider(Provider.GROK, test_config)

    def test_gemini_client_built_with_key(self, test_config: PrinConfig) -> None:
        with patch("prin_search.providers.gemini.genai") as mock_genai:
            build_provider(Provider.GEMINI, test_config)
        assert mock_genai.Client.call_args.kwargs["api_key"] == "google-test"

    def test_returned_client_satisfies_protocol(self, test_config: PrinConfig) -> None:
        from prin_search.providers.base import LLMProvider

        with patch("prin_search.providers.claude.AsyncAnthropic", MagicMock()):
            client = build_provider(Provider.CLAUDE, test_config)
        assert isinstance(client, LLMProvider)
