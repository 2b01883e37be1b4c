"""Resilience – delay escalation strategies."""
from __future__ import annotations

import abc
from typing import Any

RATE_LIMITED = 429


def status_code_of(failure: BaseException) -> int | None:
    """Return the HTTP status carried by *failure*, if any.

    Looks at a ``status_code`` attribute first, then at ``failure.response``
    (``httpx.HTTPStatusError`` and friends). Network errors carry none.
    """
    status = getattr(failure, "status_code", None)
    if isinstance(status, int):
        return status
    response: Any = getattr(failure, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


class BackoffStrategy(abc.ABC):
    """Derive the delay (milliseconds) of the next retry from the current one."""

    @abc.abstractmethod
    def next_delay(self, delay: int, failure: BaseException) -> int: ...


class ConstantBackoff(BackoffStrategy):
    """Never escalates."""

    def next_delay(self, delay: int, failure: BaseException) -> int:  # noqa: ARG002
        return delay


class RateLimitBackoff(BackoffStrategy):
    """Multiply the delay when the server signalled rate limiting (HTTP 429)."""

    def __init__(self, factor: int = 2, status_codes: frozenset[int] = frozenset({RATE_LIMITED})) -> None:
        if factor < 1:
            raise ValueError("factor must be >= 1")
        self._factor = factor
        self._status_codes = status_codes

    def next_delay(self, delay: int, failure: BaseException) -> int:
        if status_code_of(failure) in self._status_codes:
            return delay * self._factor
        return delay


__all__ = ["BackoffStrategy", "ConstantBackoff", "RATE_LIMITED", "RateLimitBackoff", "status_code_of"]
