"""Observability – Counter, Histogram, Metrics ports.

These are the recorder side of an observation: a convention produces the
labels, a ``Metrics`` backend records values against them.
"""
from __future__ import annotations

import abc


class Counter(abc.ABC):
    """Monotonically increasing counter."""

    @abc.abstractmethod
    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None: ...


class Histogram(abc.ABC):
    """Distribution / latency histogram."""

    @abc.abstractmethod
    def record(self, value: float, labels: dict[str, str] | None = None) -> None: ...


class Metrics(abc.ABC):
    """Port: factory for metric instruments."""

    @abc.abstractmethod
    def counter(self, name: str, description: str = "", unit: str = "") -> Counter: ...

    @abc.abstractmethod
    def histogram(self, name: str, description: str = "", unit: str = "ms") -> Histogram: ...


__all__ = ["Counter", "Histogram", "Metrics"]
