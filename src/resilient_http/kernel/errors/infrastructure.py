"""Infrastructure errors – failures of a single transport attempt."""

from __future__ import annotations

from typing import Any

from resilient_http.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Transport / I/O failure of one attempt."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """The request never produced a response (DNS, refused, reset, …)."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(InfrastructureError):  # noqa: A001
    """The transport gave up waiting for a response."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """The remote service answered with a non-2xx status."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        response: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code
        self.response = response
        if status_code is not None:
            self.detail.setdefault("status_code", status_code)


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
