"""Conventions – tag key names and shared sentinel values."""
from __future__ import annotations

from enum import Enum

DEFAULT_NAME = "http.server.requests"

UNKNOWN = "UNKNOWN"
NONE = "NONE"
ROOT = "root"
NOT_FOUND = "NOT_FOUND"
REDIRECTION = "REDIRECTION"


class LowCardinalityKeyNames(str, Enum):
    """Keys whose values come from a small, bounded vocabulary."""

    METHOD = "method"
    URI = "uri"
    STATUS = "status"
    EXCEPTION = "exception"
    OUTCOME = "outcome"


class HighCardinalityKeyNames(str, Enum):
    """Keys whose values are unbounded; trace detail only, never metric labels."""

    HTTP_URL = "http.url"


__all__ = [
    "DEFAULT_NAME",
    "HighCardinalityKeyNames",
    "LowCardinalityKeyNames",
    "NONE",
    "NOT_FOUND",
    "REDIRECTION",
    "ROOT",
    "UNKNOWN",
]
