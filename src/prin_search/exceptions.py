"""Exception hierarchy for prin-search.

Transport failures raised by the provider SDKs are not wrapped: they reach
the caller unchanged so their message can be shown as-is.
"""

from __future__ import annotations


class PrinError(Exception):
    """Base exception for all prin-search errors."""


class MissingCredentialError(PrinError):
    """Raised when the selected provider has no API key configured."""

    def __init__(self, provider: str, env_var: str) -> None:
        self.provider = provider
        self.env_var = env_var
        super().__init__(f"Missing {env_var}")


class ProviderInitError(PrinError):
    """Raised when a provider client fails to initialize."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"Failed to initialize provider '{provider}': {reason}")


class MalformedResponseError(PrinError):
    """Raised in strict mode when a reply lacks the expected text field."""

    def __init__(self, provider: str, path: str) -> None:
        self.provider = provider
        self.path = path
        super().__init__(f"Malformed response from '{provider}': missing {path}")
