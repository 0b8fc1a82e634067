"""Shared test fixtures for prin-search."""

from __future__ import annotations

from pathlib import Path

import pytest

import prin_search.observability.logging as log_mod
from prin_search.config import CREDENTIAL_ENV_VARS, PrinConfig
from prin_search.observability.tracing import disable_tracing
from prin_search.testing import FakeProvider

_PRIN_ENV_VARS = (
    "PRIN_PROVIDER",
    "PRIN_MODEL",
    "PRIN_TIMEOUT_SECONDS",
    "PRIN_STRICT_RESPONSES",
    "PRIN_LOG_LEVEL",
    "PRIN_LOG_FORMAT",
    "PRIN_TRACE_ENABLED",
    "PRIN_TRACE_EXPORTER",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Hide the developer's real keys and any local .env file from tests.

    Logging is marked as configured so routers built in tests leave the
    root logger alone.
    """
    for env_var in (*CREDENTIAL_ENV_VARS.values(), *_PRIN_ENV_VARS):
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(log_mod, "_CONFIGURED", True)
    disable_tracing()


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Return a fresh FakeProvider."""
    return FakeProvider(default="fake answer")


@pytest.fixture
def test_config() -> PrinConfig:
    """Return a PrinConfig with a fake key for every provider."""
    return PrinConfig(
        openai_api_key="sk-openai-test",  # type: ignore[arg-type]
        google_api_key="google-test",  # type: ignore[arg-type]
        anthropic_api_key="sk-ant-test",  # type: ignore[arg-type]
        pplx_api_key="pplx-test",  # type: ignore[arg-type]
        deepseek_api_key="deepseek-test",  # type: ignore[arg-type]
        xai_api_key="xai-test",  # type: ignore[arg-type]
    )
