"""Conventions – ServerRequestObservationRecorder.

Hands the output of a convention to the metrics and tracing backends once an
exchange completes.  Backend failures are logged, never raised: recording an
observation must not be able to fail the request it describes.
"""
from __future__ import annotations

from http_observation.observability.conventions.context import ExchangeContext
from http_observation.observability.conventions.default import DefaultServerRequestObservationConvention
from http_observation.observability.conventions.key_values import KeyValues
from http_observation.observability.conventions.ports import ServerRequestObservationConvention
from http_observation.observability.logging import get_logger
from http_observation.observability.metrics import Counter, Histogram, Metrics
from http_observation.observability.tracing import Span

_log = get_logger(__name__)


class ServerRequestObservationRecorder:
    """Record one completed exchange as a duration histogram and a counter.

    Both instruments are keyed by ``convention.name`` and labelled with the
    low-cardinality tags only.  High-cardinality tags go to the span.  Without
    ``metrics`` the tags are still derived, logged and put on the span.
    """

    def __init__(
        self,
        convention: ServerRequestObservationConvention | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self._convention = convention or DefaultServerRequestObservationConvention()
        name = self._convention.name
        self._duration: Histogram | None = None
        self._requests: Counter | None = None
        if metrics is not None:
            self._duration = metrics.histogram(name, "Duration of HTTP server requests", "ms")
            self._requests = metrics.counter(f"{name}.count", "Total HTTP server requests")

    @property
    def convention(self) -> ServerRequestObservationConvention:
        return self._convention

    def record(
        self,
        context: ExchangeContext,
        duration_ms: float,
        span: Span | None = None,
    ) -> KeyValues:
        """Record *context*; returns the low-cardinality tags that were used."""
        convention = self._convention
        if not convention.supports_context(context):
            _log.debug("http.observation.unsupported_context", observation=convention.name)
            return KeyValues.empty()

        low = convention.low_cardinality_tags(context)
        labels = low.to_dict()
        if self._duration is not None and self._requests is not None:
            try:
                self._duration.record(duration_ms, labels)
                self._requests.add(1.0, labels)
            except Exception as exc:  # noqa: BLE001
                _log.warning("http.observation.metrics_failed", observation=convention.name, error=repr(exc))

        if span is not None:
            try:
                span.update_name(convention.contextual_name(context))
                for pair in low.and_(*convention.high_cardinality_tags(context)):
                    span.set_attribute(pair.key, pair.value)
            except Exception as exc:  # noqa: BLE001
                _log.warning("http.observation.span_failed", observation=convention.name, error=repr(exc))

        _log.debug(
            "http.observation.recorded",
            observation=convention.name,
            duration_ms=round(duration_ms, 3),
            tags=labels,
        )
        return low


__all__ = ["ServerRequestObservationRecorder"]
