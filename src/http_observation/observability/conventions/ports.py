"""Conventions – ServerRequestObservationConvention port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from http_observation.observability.conventions.context import ExchangeContext
from http_observation.observability.conventions.key_values import KeyValues


@runtime_checkable
class ServerRequestObservationConvention(Protocol):
    """Naming and tagging rules for HTTP server request observations.

    Implementations must be total: every method returns a value for any
    context and never raises.  Alternate conventions implement this protocol
    rather than subclassing the default one.
    """

    @property
    def name(self) -> str: ...

    def contextual_name(self, context: ExchangeContext) -> str: ...

    def low_cardinality_tags(self, context: ExchangeContext) -> KeyValues: ...

    def high_cardinality_tags(self, context: ExchangeContext) -> KeyValues: ...

    def supports_context(self, context: object) -> bool: ...


__all__ = ["ServerRequestObservationConvention"]
