"""Observability – structured logging for the HTTP client."""
from resilient_http.observability.logging import JsonLoggerFactory, Logger, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
