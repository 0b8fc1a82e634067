"""prin-search: send one prompt to any of several hosted LLMs.

Usage:
    from prin_search import Router

    router = Router()  # reads API keys and PRIN_* env vars
    text = await router.dispatch("gemini", "Write a haiku")
"""

from __future__ import annotations

from prin_search.config import PrinConfig
from prin_search.exceptions import (
    MalformedResponseError,
    MissingCredentialError,
    PrinError,
    ProviderInitError,
)
from prin_search.providers.base import LLMProvider
from prin_search.registry import build_provider, default_model, list_providers
from prin_search.router import Router
from prin_search.types import LLMMessage, LLMResponse, Provider, Request

__all__ = [
    # Core
    "Router",
    "PrinConfig",
    # Types
    "Provider",
    "Request",
    "LLMResponse",
    "LLMMessage",
    # Provider
    "LLMProvider",
    "build_provider",
    "default_model",
    "list_providers",
    # Exceptions
    "PrinError",
    "MissingCredentialError",
    "ProviderInitError",
    "MalformedResponseError",
]
