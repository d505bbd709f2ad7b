"""OpenTelemetry adapter – OtelTracer."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator

from http_observation.observability.tracing import Span, Tracer


def _require_otel() -> None:
    try:
        import opentelemetry  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'http-observation[otel]' to use the OpenTelemetry adapter") from exc


class _OtelSpan(Span):
    def __init__(self, span: Any) -> None:
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def update_name(self, name: str) -> None:
        self._span.update_name(name)


class OtelTracer(Tracer):
    """OpenTelemetry tracer adapter.

    ``tracer_provider`` defaults to the globally configured provider.  Spans
    that exit with an exception are marked ERROR by the SDK.
    """

    def __init__(self, service_name: str = "service", tracer_provider: Any = None) -> None:
        _require_otel()
        from opentelemetry import trace
        self._tracer = trace.get_tracer(service_name, tracer_provider=tracer_provider)

    @contextlib.asynccontextmanager
    async def start_server_span(self, name: str) -> AsyncIterator[Span]:
        from opentelemetry.trace import SpanKind
        with self._tracer.start_as_current_span(name, kind=SpanKind.SERVER) as span:
            yield _OtelSpan(span)


__all__ = ["OtelTracer"]
