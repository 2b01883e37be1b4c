"""Observability – structured logging ports and helpers."""
from resilient_http.observability.logging.factory import JsonLoggerFactory, get_logger
from resilient_http.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
