"""Search metrics exposed through Prometheus and OpenTelemetry.

Each metric is a Prometheus collector paired with an OpenTelemetry
instrument taken from the global meter provider. Until an entry point
calls ``init_metrics`` that provider is OpenTelemetry's proxy, so the
instruments record nothing and searching never installs a provider.
"""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING, Any

from opentelemetry import metrics as otel_metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource
from prometheus_client import Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


_provider_holder: dict[str, MeterProvider | None] = {"provider": None}

_meter = otel_metrics.get_meter(__name__)


def init_metrics(service_name: str = "resilience-search") -> MeterProvider:
    """Install the process meter provider. Safe to call more than once."""
    provider = _provider_holder["provider"]
    if provider is None:
        provider = MeterProvider(resource=Resource.create({"service.name": service_name}))
        otel_metrics.set_meter_provider(provider)
        _provider_holder["provider"] = provider
    return provider


class MetricBridge:
    """One Prometheus collector mirrored to one OpenTelemetry instrument."""

    def __init__(self, prom_metric: Counter | Gauge | Histogram, otel_instrument: Any) -> None:
        self._prom_metric = prom_metric
        self._otel_instrument = otel_instrument
        self._gauge_values: dict[tuple[tuple[str, str], ...], float] = {}

    def inc(self, amount: float = 1.0, **labels: str) -> None:
        self._prom_metric.labels(**labels).inc(amount)
        self._otel_instrument.add(amount, labels)

    def observe(self, value: float, **labels: str) -> None:
        self._prom_metric.labels(**labels).observe(value)
        self._otel_instrument.record(value, labels)

    def set(self, value: float, **labels: str) -> None:
        # OTel has no settable gauge here; forward the change as an up-down delta
        self._prom_metric.labels(**labels).set(value)
        key = tuple(sorted(labels.items()))
        delta = value - self._gauge_values.get(key, 0.0)
        if delta:
            self._otel_instrument.add(delta, labels)
        self._gauge_values[key] = value


SEARCH_LATENCY = MetricBridge(
    Histogram(
        "project_search_latency_seconds",
        "Project search latency in seconds",
        ["source"],
        buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
    ),
    _meter.create_histogram("project_search_latency_seconds", unit="s", description="Project search latency"),
)

SEARCH_REQUESTS = MetricBridge(
    Counter("project_search_requests_total", "Total project searches by outcome", ["outcome"]),
    _meter.create_counter("project_search_requests_total", description="Total project searches by outcome"),
)

COLLECTION_SIZE = MetricBridge(
    Gauge("project_collection_features", "Features in the loaded project collection", ["source"]),
    _meter.create_up_down_counter("project_collection_features", description="Features in the loaded collection"),
)


@contextmanager
def track_latency(histogram: MetricBridge, **labels: str) -> Generator[None, None, None]:
    """Observe the wall time of the wrapped block, even when it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start, **labels)


def get_metrics() -> bytes:
    """Render every registered metric in the Prometheus text format."""
    return generate_latest()
