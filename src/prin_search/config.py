"""prin-search configuration via environment variables."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings

from prin_search.exceptions import MissingCredentialError
from prin_search.types import Provider

# Provider → environment variable holding its API key.
CREDENTIAL_ENV_VARS: dict[Provider, str] = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.GEMINI: "GOOGLE_API_KEY",
    Provider.CLAUDE: "ANTHROPIC_API_KEY",
    Provider.PERPLEXITY: "PPLX_API_KEY",
    Provider.DEEPSEEK: "DEEPSEEK_API_KEY",
    Provider.GROK: "XAI_API_KEY",
}


def _key_field(env_var: str) -> Any:
    return Field(default=None, validation_alias=AliasChoices(env_var, env_var.lower()))


class PrinConfig(BaseSettings):
    """prin-search configuration.

    Runtime options are read from ``PRIN_``-prefixed environment variables
    (``PRIN_PROVIDER=claude`` sets ``provider="claude"``). API keys keep
    their conventional names (``OPENAI_API_KEY``, ``GOOGLE_API_KEY``, ...).
    A ``.env`` file in the working directory is honoured as well.

    The config is loaded once and handed to the router; nothing below the
    CLI reads the environment directly.
    """

    model_config = {
        "env_prefix": "PRIN_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    # ── Selection ───────────────────────────────────────────────
    provider: str = Field(
        default="gemini",
        description="Provider key: openai, chatgpt, gemini, claude, perplexity, deepseek, grok.",
    )
    model: str | None = Field(
        default=None,
        description="Model override. None means the provider's default model.",
    )

    # ── Credentials ─────────────────────────────────────────────
    openai_api_key: SecretStr | None = _key_field("OPENAI_API_KEY")
    google_api_key: SecretStr | None = _key_field("GOOGLE_API_KEY")
    anthropic_api_key: SecretStr | None = _key_field("ANTHROPIC_API_KEY")
    pplx_api_key: SecretStr | None = _key_field("PPLX_API_KEY")
    deepseek_api_key: SecretStr | None = _key_field("DEEPSEEK_API_KEY")
    xai_api_key: SecretStr | None = _key_field("XAI_API_KEY")

    # ── Request behaviour ───────────────────────────────────────
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout. None leaves the SDK default in place.",
    )
    strict_responses: bool = Field(
        default=False,
        description="Raise MalformedResponseError instead of returning '' for replies without text.",
    )

    # ── Observability ───────────────────────────────────────────
    trace_enabled: bool = Field(default=False)
    trace_exporter: str = Field(
        default="none",
        description="Trace exporter: 'none', 'console', 'otlp'.",
    )
    trace_endpoint: str = Field(default="http://localhost:4317")
    trace_service_name: str = Field(default="prin-search")

    log_level: str = Field(default="WARNING")
    log_format: str = Field(
        default="console",
        description="Log format: 'json' or 'console'.",
    )

    def get_api_key(self, provider: Provider) -> str:
        """Return the API key for *provider* as a plain string.

        Raises:
            MissingCredentialError: If the key is unset or empty.
        """
        env_var = CREDENTIAL_ENV_VARS[provider]
        secret: SecretStr | None = getattr(self, env_var.lower())
        if secret is None or not secret.get_secret_value():
            raise MissingCredentialError(provider.value, env_var)
        return secret.get_secret_value()
