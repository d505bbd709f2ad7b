"""FastAPI adapter – ASGI observation middleware.

Builds one :class:`ExchangeContext` per HTTP request, fills it in from the
ASGI message flow and hands it to a
:class:`ServerRequestObservationRecorder` when the exchange ends.
"""
from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any

from http_observation.observability.conventions import (
    ExchangeContext,
    ServerRequestObservationConvention,
    ServerRequestObservationRecorder,
)
from http_observation.observability.metrics import Metrics
from http_observation.observability.tracing import Span, Tracer

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'http-observation[fastapi]' to use the FastAPI adapter"
        ) from exc


def _raw_path(scope: "Scope") -> str:
    """Request path as sent by the client (not percent-decoded)."""
    raw = scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return scope.get("path", "")


def _mount_prefix(app: Any, request_scope: "Scope", route: Any) -> str:
    """Template of the top-level ``Mount`` that served *route*, if any."""
    from starlette.routing import Match, Mount

    routes = getattr(app, "routes", None) or []
    if route in routes:
        return ""
    for candidate in routes:
        if isinstance(candidate, Mount):
            match, _ = candidate.matches(request_scope)
            if match is Match.FULL:
                return candidate.path
    return ""


def _route_template(app: Any, request_scope: "Scope", scope: "Scope") -> str | None:
    """Template of the route FastAPI matched for this request, if any.

    Routes of a mounted sub-application are prefixed with the mount's own
    template, so ``/v1/users/{id}`` and ``/v2/users/{id}`` stay distinct.
    """
    route = scope.get("route")
    if route is None:
        return None
    template = getattr(route, "path_format", None) or getattr(route, "path", None)
    if template is None:
        return None
    return _mount_prefix(app, request_scope, route) + template


class FastAPIObservationMiddleware:
    """Record every HTTP exchange through a server request convention.

    * status comes from ``http.response.start``
    * ``uri`` comes from the matched route template (never the raw path)
    * ``http.url`` is the raw, undecoded request path
    * an exception raised by the app is captured and re-raised
    * a client disconnect before the response body completes, or task
      cancellation, marks the exchange as aborted
    """

    def __init__(
        self,
        app: "ASGIApp",
        metrics: Metrics | None = None,
        tracer: Tracer | None = None,
        convention: ServerRequestObservationConvention | None = None,
    ) -> None:
        _require_fastapi()
        self.app = app
        self._recorder = ServerRequestObservationRecorder(convention=convention, metrics=metrics)
        self._tracer = tracer

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if self._tracer is None:
            await self._observe(scope, receive, send, None)
            return
        async with self._tracer.start_server_span(self._recorder.convention.name) as span:
            await self._observe(scope, receive, send, span)

    async def _observe(self, scope: "Scope", receive: "Receive", send: "Send", span: Span | None) -> None:
        request_scope = dict(scope)
        context = ExchangeContext.for_request(scope.get("method", ""), _raw_path(scope))
        response_complete: list[bool] = [False]

        async def receive_watching() -> Any:
            message = await receive()
            if message["type"] == "http.disconnect" and not response_complete[0]:
                context.abort()
            return message

        async def send_capturing(message: Any) -> None:
            if message["type"] == "http.response.start":
                context.set_response(message.get("status"))
            elif message["type"] == "http.response.body" and not message.get("more_body", False):
                response_complete[0] = True
            await send(message)

        start = time.perf_counter()
        try:
            await self.app(scope, receive_watching, send_capturing)
        except asyncio.CancelledError:
            context.abort()
            raise
        except Exception as exc:
            context.set_error(exc)
            raise
        finally:
            context.set_path_pattern(_route_template(request_scope.get("app"), request_scope, scope))
            elapsed = (time.perf_counter() - start) * 1000
            self._recorder.record(context, elapsed, span)


__all__ = ["FastAPIObservationMiddleware"]
