"""Observability – distributed tracing ports."""
from http_observation.observability.tracing.ports import Span, Tracer

__all__ = ["Span", "Tracer"]
