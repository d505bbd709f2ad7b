"""Unit tests for OpenTelemetry adapters, against the in-memory SDK."""
from __future__ import annotations

import asyncio
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from opentelemetry import trace
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from http_observation.adapters.fastapi import FastAPIObservationMiddleware
from http_observation.adapters.opentelemetry import OtelMetrics, OtelTracer
from http_observation.observability.metrics import Counter, Histogram


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def metric_reader() -> InMemoryMetricReader:
    return InMemoryMetricReader()


@pytest.fixture()
def otel_metrics(metric_reader: InMemoryMetricReader) -> OtelMetrics:
    return OtelMetrics(meter_provider=MeterProvider(metric_readers=[metric_reader]))


@pytest.fixture()
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture()
def otel_tracer(span_exporter: InMemorySpanExporter) -> OtelTracer:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return OtelTracer("test-service", tracer_provider=provider)


def data_points(reader: InMemoryMetricReader, name: str) -> list[Any]:
    data = reader.get_metrics_data()
    if data is None:
        return []
    return [
        point
        for resource_metrics in data.resource_metrics
        for scope_metrics in resource_metrics.scope_metrics
        for metric in scope_metrics.metrics
        if metric.name == name
        for point in metric.data.data_points
    ]


# ---------------------------------------------------------------------------
# OtelMetrics
# ---------------------------------------------------------------------------


class TestOtelMetrics:
    def test_counter_records_with_attributes(self, otel_metrics: OtelMetrics, metric_reader: InMemoryMetricReader) -> None:
        counter = otel_metrics.counter("http.server.requests.count")
        assert isinstance(counter, Counter)
        counter.add(1.0, {"method": "GET"})
        counter.add(2.0, {"method": "GET"})
        points = data_points(metric_reader, "http.server.requests.count")
        assert len(points) == 1
        assert points[0].value == 3.0
        assert dict(points[0].attributes) == {"method": "GET"}

    def test_histogram_records(self, otel_metrics: OtelMetrics, metric_reader: InMemoryMetricReader) -> None:
        hist = otel_metrics.histogram("http.server.requests")
        assert isinstance(hist, Histogram)
        hist.record(12.0, {"status": "200"})
        points = data_points(metric_reader, "http.server.requests")
        assert points[0].count == 1
        assert points[0].sum == 12.0


# ---------------------------------------------------------------------------
# OtelTracer
# ---------------------------------------------------------------------------


class TestOtelTracer:
    def test_server_span_exported_with_attributes(self, otel_tracer: OtelTracer, span_exporter: InMemorySpanExporter) -> None:
        async def _run() -> None:
            async with otel_tracer.start_server_span("http.server.requests") as span:
                span.set_attribute("uri", "/users/{id}")

        asyncio.run(_run())
        finished = span_exporter.get_finished_spans()
        assert len(finished) == 1
        assert finished[0].kind == trace.SpanKind.SERVER
        assert finished[0].attributes["uri"] == "/users/{id}"

    def test_update_name(self, otel_tracer: OtelTracer, span_exporter: InMemorySpanExporter) -> None:
        async def _run() -> None:
            async with otel_tracer.start_server_span("initial") as span:
                span.update_name("http get /users/{id}")

        asyncio.run(_run())
        assert span_exporter.get_finished_spans()[0].name == "http get /users/{id}"

    def test_exception_marks_span_error(self, otel_tracer: OtelTracer, span_exporter: InMemorySpanExporter) -> None:
        async def _run() -> None:
            async with otel_tracer.start_server_span("failing"):
                raise ValueError("bad")

        with pytest.raises(ValueError):
            asyncio.run(_run())
        finished = span_exporter.get_finished_spans()[0]
        assert finished.status.status_code == trace.StatusCode.ERROR


# ---------------------------------------------------------------------------
# End to end: FastAPI middleware over the OpenTelemetry SDK
# ---------------------------------------------------------------------------


class TestMiddlewareWithOtel:
    def test_request_produces_metric_and_span(
        self,
        otel_metrics: OtelMetrics,
        metric_reader: InMemoryMetricReader,
        otel_tracer: OtelTracer,
        span_exporter: InMemorySpanExporter,
    ) -> None:
        app = FastAPI()
        app.add_middleware(FastAPIObservationMiddleware, metrics=otel_metrics, tracer=otel_tracer)

        @app.get("/users/{user_id}")
        async def get_user(user_id: int) -> dict:
            return {"id": user_id}

        TestClient(app).get("/users/5")

        points = data_points(metric_reader, "http.server.requests")
        assert dict(points[0].attributes) == {
            "method": "GET",
            "uri": "/users/{user_id}",
            "status": "200",
            "exception": "NONE",
            "outcome": "SUCCESS",
        }
        server_spans = [s for s in span_exporter.get_finished_spans() if s.kind == trace.SpanKind.SERVER]
        assert server_spans[0].name == "http get /users/{user_id}"
        assert server_spans[0].attributes["http.url"] == "/users/5"
