"""Benchmark: tag derivation throughput of the default convention.

Measures the per-exchange cost of ``low_cardinality_tags`` for the common
shapes an exchange completes in (matched route, unmatched 404, aborted),
plus a full recorder pass with no metrics backend attached.
"""

from __future__ import annotations

from http_observation.observability.conventions import (
    DefaultServerRequestObservationConvention,
    ExchangeContext,
    ServerRequestObservationRecorder,
)

_CONVENTION = DefaultServerRequestObservationConvention()


def _context(pattern: str | None, status: int | None, aborted: bool = False) -> ExchangeContext:
    ctx = ExchangeContext.for_request("GET", "/users/42")
    ctx.set_path_pattern(pattern)
    if status is not None:
        ctx.set_response(status)
    if aborted:
        ctx.abort()
    return ctx


def test_low_cardinality_matched_route(benchmark):
    ctx = _context("/users/{id}", 200)
    tags = benchmark(_CONVENTION.low_cardinality_tags, ctx)
    assert tags.get("uri") == "/users/{id}"


def test_low_cardinality_not_found(benchmark):
    ctx = _context(None, 404)
    tags = benchmark(_CONVENTION.low_cardinality_tags, ctx)
    assert tags.get("uri") == "NOT_FOUND"


def test_low_cardinality_aborted(benchmark):
    ctx = _context("/users/{id}", 200, aborted=True)
    tags = benchmark(_CONVENTION.low_cardinality_tags, ctx)
    assert tags.get("status") == "UNKNOWN"


def test_contextual_name(benchmark):
    ctx = _context("/users/{id}", 200)
    assert benchmark(_CONVENTION.contextual_name, ctx) == "http get /users/{id}"


def test_recorder_without_backend(benchmark):
    recorder = ServerRequestObservationRecorder(_CONVENTION)
    ctx = _context("/users/{id}", 200)
    tags = benchmark(recorder.record, ctx, 1.5)
    assert tags.get("outcome") == "SUCCESS"
