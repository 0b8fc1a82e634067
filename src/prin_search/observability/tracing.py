"""Optional OpenTelemetry spans around each dispatched prompt.

Tracing is off unless ``PRIN_TRACE_ENABLED`` is set and the ``otel`` extra
is installed. Each span carries the provider, the model actually used and,
on success, how long the provider took and how much text it returned.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from prin_search.types import LLMResponse

logger = logging.getLogger(__name__)

try:
    from opentelemetry import trace
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

    HAS_OTEL = True
except ImportError:
    HAS_OTEL = False

try:
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

    HAS_OTLP = True
except ImportError:
    HAS_OTLP = False

SPAN_NAME = "prin.dispatch"

_tracer: Any = None


def _span_exporter(exporter: str, endpoint: str) -> Any:
    """Return the span exporter for *exporter*, or None if it cannot be used."""
    if exporter == "console":
        return ConsoleSpanExporter()
    if exporter == "otlp":
        if HAS_OTLP:
            return OTLPSpanExporter(endpoint=endpoint, insecure=True)
        logger.warning("OTLP exporter requested but opentelemetry-exporter-otlp not installed")
        return None
    logger.warning("Unknown trace exporter %r; tracing disabled", exporter)
    return None


def configure_tracing(
    exporter: str = "none",
    endpoint: str = "http://localhost:4317",
    service_name: str = "prin-search",
) -> None:
    """Install a tracer for "console" or "otlp" export; "none" disables tracing."""
    global _tracer
    _tracer = None

    if exporter == "none":
        return
    if not HAS_OTEL:
        logger.warning("Tracing requested but opentelemetry-sdk is not installed")
        return

    span_exporter = _span_exporter(exporter, endpoint)
    if span_exporter is None:
        return

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer("prin_search")
    logger.info("OTEL tracing configured: exporter=%s, service=%s", exporter, service_name)


def get_tracer() -> Any:
    """Return the configured tracer, or None if tracing is disabled."""
    return _tracer


def disable_tracing() -> None:
    global _tracer
    _tracer = None


def _record_response(span: Any, response: LLMResponse) -> None:
    span.set_attribute("prin.latency_ms", response.latency_ms)
    span.set_attribute("prin.response_chars", len(response.content))
    span.set_attribute("prin.response_empty", not response.content)


@asynccontextmanager
async def traced_dispatch(provider: str, model: str) -> AsyncGenerator[dict[str, Any], None]:
    """Wrap one provider call in a span.

    Usage:
        async with traced_dispatch("openai", "gpt-4o-mini") as span_data:
            span_data["response"] = await client.complete(prompt, "gpt-4o-mini")

    The yielded dict is always usable, traced or not. A raised exception
    marks the span as failed and propagates unchanged.
    """
    span_data: dict[str, Any] = {}

    if _tracer is None:
        yield span_data
        return

    with _tracer.start_as_current_span(SPAN_NAME) as span:
        span.set_attribute("prin.provider", provider)
        span.set_attribute("prin.model", model)
        try:
            yield span_data
        except Exception as exc:
            span.set_status(trace.StatusCode.ERROR, str(exc))
            span.record_exception(exc)
            raise

        response = span_data.get("response")
        if isinstance(response, LLMResponse):
            _record_response(span, response)
