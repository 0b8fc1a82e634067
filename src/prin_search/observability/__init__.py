"""Observability sub-package: tracing and logging."""

from prin_search.observability.logging import configure_logging, get_logger
from prin_search.observability.tracing import (
    configure_tracing,
    disable_tracing,
    get_tracer,
    traced_dispatch,
)

__all__ = [
    "configure_logging",
    "configure_tracing",
    "disable_tracing",
    "get_logger",
    "get_tracer",
    "traced_dispatch",
]
