"""Observability – conventions, logging, metrics, tracing."""

from http_observation.observability.conventions import (
    DefaultServerRequestObservationConvention,
    ExchangeContext,
    ServerRequestObservationConvention,
    ServerRequestObservationRecorder,
)
from http_observation.observability.logging import JsonLoggerFactory, get_logger
from http_observation.observability.metrics import Metrics
from http_observation.observability.tracing import Span, Tracer

__all__ = [
    "DefaultServerRequestObservationConvention",
    "ExchangeContext",
    "JsonLoggerFactory",
    "Metrics",
    "ServerRequestObservationConvention",
    "ServerRequestObservationRecorder",
    "Span",
    "Tracer",
    "get_logger",
]
