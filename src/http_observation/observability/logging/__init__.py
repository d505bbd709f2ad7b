"""Observability – structured logging helpers."""
from http_observation.observability.logging.factory import JsonLoggerFactory
from http_observation.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
