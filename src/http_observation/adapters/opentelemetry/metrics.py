"""OpenTelemetry adapter – OtelMetrics."""
from __future__ import annotations

from typing import Any

from http_observation.observability.metrics import Counter, Histogram, Metrics


def _require_otel() -> None:
    try:
        import opentelemetry  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'http-observation[otel]' to use the OpenTelemetry adapter") from exc


class _OtelCounter(Counter):
    def __init__(self, counter: Any) -> None:
        self._c = counter

    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        self._c.add(value, attributes=labels)


class _OtelHistogram(Histogram):
    def __init__(self, hist: Any) -> None:
        self._h = hist

    def record(self, value: float, labels: dict[str, str] | None = None) -> None:
        self._h.record(value, attributes=labels)


class OtelMetrics(Metrics):
    """OpenTelemetry metrics adapter.

    ``meter_provider`` defaults to the globally configured provider.
    """

    def __init__(self, meter_name: str = "http_observation", meter_provider: Any = None) -> None:
        _require_otel()
        from opentelemetry import metrics
        self._meter = metrics.get_meter(meter_name, meter_provider=meter_provider)

    def counter(self, name: str, description: str = "", unit: str = "") -> Counter:
        return _OtelCounter(self._meter.create_counter(name, description=description, unit=unit))

    def histogram(self, name: str, description: str = "", unit: str = "ms") -> Histogram:
        return _OtelHistogram(self._meter.create_histogram(name, description=description, unit=unit))


__all__ = ["OtelMetrics"]
