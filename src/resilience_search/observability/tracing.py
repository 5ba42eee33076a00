"""OpenTelemetry tracing for project searches."""

from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span

logger = logging.getLogger(__name__)


def init_tracing(service_name: str = "resilience-search") -> TracerProvider:
    """Install the process tracer provider for an entry point."""
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    logger.debug("Tracing initialized for service: %s", service_name)
    return provider


@contextmanager
def create_span(name: str, attributes: dict[str, Any] | None = None) -> Generator[Span, None, None]:
    """Run the wrapped block inside a span from the global tracer provider.

    Exceptions are recorded on the span and the span status is set to error,
    both by ``start_as_current_span``.
    """
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(name, attributes=attributes) as span:
        yield span
