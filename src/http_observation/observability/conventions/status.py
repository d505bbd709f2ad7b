"""Conventions – status series and outcome classification.

The standard enumeration is :class:`http.HTTPStatus`.  Series are resolved by
lookup first and by leading digit as a fallback, so any code in 100..599
lands in one of the five buckets and everything else is ``UNKNOWN``.
"""
from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class Series(Enum):
    INFORMATIONAL = 1
    SUCCESSFUL = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5

    @classmethod
    def resolve(cls, status_code: int) -> "Series | None":
        """Series for *status_code* by its leading digit, ``None`` outside 100..599."""
        if not _is_code(status_code) or not 100 <= status_code <= 599:
            return None
        return cls(status_code // 100)


def _is_code(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def resolve_status(status_code: int) -> HTTPStatus | None:
    """Return the standard :class:`HTTPStatus` for *status_code*, if any."""
    if not _is_code(status_code):
        return None
    try:
        return HTTPStatus(status_code)
    except ValueError:
        return None


_SERIES_BY_STATUS: dict[HTTPStatus, Series] = {
    status: Series(status.value // 100) for status in HTTPStatus
}


class Outcome(str, Enum):
    """Coarse classification of a response status code."""

    INFORMATIONAL = "INFORMATIONAL"
    SUCCESS = "SUCCESS"
    REDIRECTION = "REDIRECTION"
    CLIENT_ERROR = "CLIENT_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def for_status(cls, status_code: int | None) -> "Outcome":
        if status_code is None or not _is_code(status_code):
            return cls.UNKNOWN
        if 200 <= status_code < 300:
            return cls.SUCCESS
        status = resolve_status(status_code)
        series = _SERIES_BY_STATUS[status] if status is not None else Series.resolve(status_code)
        if series is None:
            return cls.UNKNOWN
        return _OUTCOME_BY_SERIES[series]


_OUTCOME_BY_SERIES: dict[Series, Outcome] = {
    Series.INFORMATIONAL: Outcome.INFORMATIONAL,
    Series.SUCCESSFUL: Outcome.SUCCESS,
    Series.REDIRECTION: Outcome.REDIRECTION,
    Series.CLIENT_ERROR: Outcome.CLIENT_ERROR,
    Series.SERVER_ERROR: Outcome.SERVER_ERROR,
}


__all__ = ["Outcome", "Series", "resolve_status"]
