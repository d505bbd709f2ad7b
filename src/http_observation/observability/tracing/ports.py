"""Observability – Tracer and Span ports.

A server span wraps one exchange.  It is opened before routing, so it starts
under the observation name and is renamed to the contextual name once the
exchange completes.
"""
from __future__ import annotations

import abc
import contextlib
from typing import Any, AsyncIterator


class Span(abc.ABC):
    """Represents an active server span."""

    @abc.abstractmethod
    def set_attribute(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def update_name(self, name: str) -> None: ...


class Tracer(abc.ABC):
    """Port: open server spans around HTTP exchanges."""

    @abc.abstractmethod
    @contextlib.asynccontextmanager
    async def start_server_span(self, name: str) -> AsyncIterator[Span]:
        """Open a current span of kind SERVER; ends it (recording errors) on exit."""


__all__ = ["Span", "Tracer"]
