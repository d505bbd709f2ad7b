"""Conventions – DefaultServerRequestObservationConvention.

Each tag is derived by a small pure function of the :class:`ExchangeContext`.
Every branch ends in a value: missing information maps to a fixed sentinel,
never to raw request data and never to an exception.
"""
from __future__ import annotations

from http import HTTPStatus

from http_observation.observability.conventions.context import ExchangeContext
from http_observation.observability.conventions.key_values import KeyValue, KeyValues
from http_observation.observability.conventions.keys import (
    DEFAULT_NAME,
    NONE,
    NOT_FOUND,
    REDIRECTION,
    ROOT,
    UNKNOWN,
    HighCardinalityKeyNames,
    LowCardinalityKeyNames,
)
from http_observation.observability.conventions.settings import ObservationSettings
from http_observation.observability.conventions.status import Outcome, Series

_Low = LowCardinalityKeyNames

METHOD_UNKNOWN = KeyValue.of(_Low.METHOD, UNKNOWN)
STATUS_UNKNOWN = KeyValue.of(_Low.STATUS, UNKNOWN)
URI_UNKNOWN = KeyValue.of(_Low.URI, UNKNOWN)
URI_ROOT = KeyValue.of(_Low.URI, ROOT)
URI_NOT_FOUND = KeyValue.of(_Low.URI, NOT_FOUND)
URI_REDIRECTION = KeyValue.of(_Low.URI, REDIRECTION)
EXCEPTION_NONE = KeyValue.of(_Low.EXCEPTION, NONE)
OUTCOME_UNKNOWN = KeyValue.of(_Low.OUTCOME, Outcome.UNKNOWN.value)
HTTP_URL_UNKNOWN = KeyValue.of(HighCardinalityKeyNames.HTTP_URL, UNKNOWN)


def _response_code(context: ExchangeContext) -> int | None:
    code = context.status_code
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    return int(code)


def _status_code(context: ExchangeContext) -> int | None:
    """Status code of a trustworthy, finalized response; ``None`` otherwise."""
    if context.connection_aborted:
        return None
    return _response_code(context)


def method(context: ExchangeContext) -> KeyValue:
    if context.carrier is None:
        return METHOD_UNKNOWN
    return KeyValue.of(_Low.METHOD, context.carrier.method.upper())


def status(context: ExchangeContext) -> KeyValue:
    code = _status_code(context)
    if code is None:
        return STATUS_UNKNOWN
    return KeyValue.of(_Low.STATUS, str(code))


def uri(context: ExchangeContext) -> KeyValue:
    """Matched route template, or a fixed bucket when there is none.

    Unmatched paths (404) and redirects issued before routing collapse to
    ``NOT_FOUND`` / ``REDIRECTION`` so raw paths never become label values.
    """
    if context.carrier is None:
        return URI_UNKNOWN
    pattern = context.path_pattern
    if pattern is not None:
        if pattern == "":
            return URI_ROOT
        return KeyValue.of(_Low.URI, pattern)
    code = _response_code(context)
    if code is not None:
        if Series.resolve(code) is Series.REDIRECTION:
            return URI_REDIRECTION
        if code == HTTPStatus.NOT_FOUND:
            return URI_NOT_FOUND
    return URI_UNKNOWN


def exception(context: ExchangeContext) -> KeyValue:
    error = context.error
    if error is None:
        return EXCEPTION_NONE
    return KeyValue.of(_Low.EXCEPTION, error_type_name(error))


def outcome(context: ExchangeContext) -> KeyValue:
    code = _status_code(context)
    if code is None:
        return OUTCOME_UNKNOWN
    return KeyValue.of(_Low.OUTCOME, Outcome.for_status(code).value)


def http_url(context: ExchangeContext) -> KeyValue:
    if context.carrier is None:
        return HTTP_URL_UNKNOWN
    return KeyValue.of(HighCardinalityKeyNames.HTTP_URL, context.carrier.path)


def error_type_name(error: BaseException) -> str:
    """Simple class name, or the qualified one when the simple name is blank."""
    cls = type(error)
    simple = cls.__name__
    if simple and simple.strip():
        return simple
    return f"{cls.__module__}.{cls.__qualname__}"


class DefaultServerRequestObservationConvention:
    """Default naming and tagging for HTTP server request observations.

    Stateless after construction; safe to share across threads and tasks.

    Usage::

        convention = DefaultServerRequestObservationConvention()
        labels = convention.low_cardinality_tags(context).to_dict()
    """

    __slots__ = ("_name",)

    def __init__(self, name: str = DEFAULT_NAME) -> None:
        self._name = name

    @classmethod
    def from_settings(cls, settings: ObservationSettings) -> "DefaultServerRequestObservationConvention":
        return cls(name=settings.name)

    @property
    def name(self) -> str:
        return self._name

    def supports_context(self, context: object) -> bool:
        return isinstance(context, ExchangeContext)

    def contextual_name(self, context: ExchangeContext) -> str:
        verb = method(context).value.lower()
        if context.path_pattern is not None:
            return f"http {verb} {context.path_pattern}"
        return f"http {verb}"

    def low_cardinality_tags(self, context: ExchangeContext) -> KeyValues:
        return KeyValues.of(
            method(context),
            uri(context),
            status(context),
            exception(context),
            outcome(context),
        )

    def high_cardinality_tags(self, context: ExchangeContext) -> KeyValues:
        return KeyValues.of(http_url(context))

    def __repr__(self) -> str:
        return f"DefaultServerRequestObservationConvention(name={self._name!r})"


__all__ = [
    "DefaultServerRequestObservationConvention",
    "error_type_name",
    "exception",
    "http_url",
    "method",
    "outcome",
    "status",
    "uri",
]
