"""OpenTelemetry adapter – tracer and metrics."""
from http_observation.adapters.opentelemetry.tracer import OtelTracer
from http_observation.adapters.opentelemetry.metrics import OtelMetrics

__all__ = ["OtelMetrics", "OtelTracer"]
