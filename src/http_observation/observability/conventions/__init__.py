"""Observability – HTTP server request observation conventions."""
from http_observation.observability.conventions.context import ExchangeContext, RequestCarrier, ResponseState
from http_observation.observability.conventions.default import DefaultServerRequestObservationConvention
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
from http_observation.observability.conventions.ports import ServerRequestObservationConvention
from http_observation.observability.conventions.recorder import ServerRequestObservationRecorder
from http_observation.observability.conventions.settings import InvalidObservationSettingError, ObservationSettings
from http_observation.observability.conventions.status import Outcome, Series, resolve_status

__all__ = [
    "DEFAULT_NAME",
    "DefaultServerRequestObservationConvention",
    "ExchangeContext",
    "HighCardinalityKeyNames",
    "InvalidObservationSettingError",
    "KeyValue",
    "KeyValues",
    "LowCardinalityKeyNames",
    "NONE",
    "NOT_FOUND",
    "ObservationSettings",
    "Outcome",
    "REDIRECTION",
    "ROOT",
    "RequestCarrier",
    "ResponseState",
    "Series",
    "ServerRequestObservationConvention",
    "ServerRequestObservationRecorder",
    "UNKNOWN",
    "resolve_status",
]
