"""Observability – metrics ports."""
from http_observation.observability.metrics.ports import Counter, Histogram, Metrics

__all__ = ["Counter", "Histogram", "Metrics"]
