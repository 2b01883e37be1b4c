"""Application-layer errors – outcomes surfaced to the caller of the client."""

from __future__ import annotations

from typing import Any

from resilient_http.kernel.errors.base import BaseError

ATTEMPTS_EXCEEDED_MESSAGE = "Number of attempts exceeded."


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AttemptsExceededError(ApplicationError):
    """A request failed on every attempt allowed by its cap.

    The message is always :data:`ATTEMPTS_EXCEEDED_MESSAGE`; the failure of
    the last attempt is available as ``cause``.
    """

    default_code = "attempts_exceeded"

    def __init__(
        self,
        *,
        attempts: int,
        max_attempts: int,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            ATTEMPTS_EXCEEDED_MESSAGE,
            detail={"attempts": attempts, "max_attempts": max_attempts},
            **kwargs,
        )
        self.attempts = attempts
        self.max_attempts = max_attempts


__all__ = ["ATTEMPTS_EXCEEDED_MESSAGE", "ApplicationError", "AttemptsExceededError"]
