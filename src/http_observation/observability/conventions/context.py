"""Conventions – ExchangeContext and its parts."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class RequestCarrier:
    """The request side of an exchange: method token and raw path."""
    method: str
    path: str


@dataclasses.dataclass(frozen=True)
class ResponseState:
    """The finalized response; ``status_code`` may still be unknown."""
    status_code: int | None = None


@dataclasses.dataclass
class ExchangeContext:
    """State of one request/response exchange, as seen by a convention.

    Instrumentation creates one context per request and fills it in as the
    exchange progresses.  Conventions only read it, once, at completion.
    A ``connection_aborted`` exchange has no trustworthy response state.
    """

    carrier: RequestCarrier | None = None
    response: ResponseState | None = None
    path_pattern: str | None = None
    connection_aborted: bool = False
    error: BaseException | None = None

    @classmethod
    def for_request(cls, method: str, path: str) -> "ExchangeContext":
        return cls(carrier=RequestCarrier(method=method, path=path))

    @property
    def status_code(self) -> int | None:
        if self.response is None:
            return None
        return self.response.status_code

    def set_response(self, status_code: int | None) -> None:
        self.response = ResponseState(status_code=status_code)

    def set_path_pattern(self, pattern: str | None) -> None:
        self.path_pattern = pattern

    def set_error(self, error: BaseException | None) -> None:
        self.error = error

    def abort(self) -> None:
        self.connection_aborted = True


__all__ = ["ExchangeContext", "RequestCarrier", "ResponseState"]
