"""Logging, metrics and tracing for resilience-search."""

from resilience_search.observability.logging import JsonFormatter, configure_logging
from resilience_search.observability.metrics import (
    COLLECTION_SIZE,
    SEARCH_LATENCY,
    SEARCH_REQUESTS,
    get_metrics,
    init_metrics,
    track_latency,
)
from resilience_search.observability.tracing import create_span, init_tracing


__all__ = [
    "COLLECTION_SIZE",
    "SEARCH_LATENCY",
    "SEARCH_REQUESTS",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "init_metrics",
    "init_tracing",
    "track_latency",
]
