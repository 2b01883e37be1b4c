"""Unit tests for RetryState and delay escalation strategies."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from resilient_http.kernel.errors import ConnectionError, ExternalServiceError
from resilient_http.resilience.retry import (
    ConstantBackoff,
    RateLimitBackoff,
    RetryState,
    status_code_of,
)


def _status_error(status: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://svc/x")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError(f"HTTP {status}", request=request, response=response)


# ---------------------------------------------------------------------------
# RetryState
# ---------------------------------------------------------------------------


class TestRetryState:
    def test_defaults(self) -> None:
        state = RetryState()
        assert (state.attempts, state.retry_delay, state.max_attempts) == (0, 0, 0)

    def test_is_frozen(self) -> None:
        state = RetryState(retry_delay=100, max_attempts=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.attempts = 1  # type: ignore[misc]

    def test_negative_values_rejected(self) -> None:
        for kwargs in ({"attempts": -1}, {"retry_delay": -5}, {"max_attempts": -1}):
            with pytest.raises(ValueError):
                RetryState(**kwargs)

    def test_advance_increments_by_one(self) -> None:
        state = RetryState(attempts=0, retry_delay=100, max_attempts=3)
        nxt = state.advance(200)
        assert nxt == RetryState(attempts=1, retry_delay=200, max_attempts=3)
        assert state.attempts == 0

    def test_advance_refuses_shorter_delay(self) -> None:
        with pytest.raises(ValueError):
            RetryState(retry_delay=200).advance(100)

    def test_exhausted_at_cap(self) -> None:
        assert not RetryState(attempts=1, max_attempts=2).exhausted
        assert RetryState(attempts=2, max_attempts=2).exhausted
        assert RetryState(attempts=3, max_attempts=2).exhausted

    def test_zero_cap_is_unbounded(self) -> None:
        state = RetryState(attempts=10_000, max_attempts=0)
        assert state.unbounded
        assert not state.exhausted


# ---------------------------------------------------------------------------
# status_code_of
# ---------------------------------------------------------------------------


class TestStatusCodeOf:
    def test_external_service_error(self) -> None:
        assert status_code_of(ExternalServiceError("svc", status_code=429)) == 429

    def test_httpx_status_error(self) -> None:
        assert status_code_of(_status_error(503)) == 503

    def test_network_error_has_none(self) -> None:
        assert status_code_of(ConnectionError("http://svc")) is None
        assert status_code_of(httpx.ConnectError("refused")) is None

    def test_foreign_exception_has_none(self) -> None:
        assert status_code_of(ValueError("x")) is None

    def test_non_integer_status_ignored(self) -> None:
        exc = RuntimeError("odd")
        exc.status_code = "429"  # type: ignore[attr-defined]
        assert status_code_of(exc) is None


# ---------------------------------------------------------------------------
# Backoff strategies
# ---------------------------------------------------------------------------


class TestRateLimitBackoff:
    def test_doubles_on_429(self) -> None:
        b = RateLimitBackoff()
        assert b.next_delay(100, ExternalServiceError("svc", status_code=429)) == 200
        assert b.next_delay(200, _status_error(429)) == 400

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_unchanged_on_other_status(self, status: int) -> None:
        assert RateLimitBackoff().next_delay(100, ExternalServiceError("svc", status_code=status)) == 100

    def test_unchanged_without_response(self) -> None:
        assert RateLimitBackoff().next_delay(100, TimeoutError("slow")) == 100

    def test_custom_factor_and_codes(self) -> None:
        b = RateLimitBackoff(factor=3, status_codes=frozenset({429, 503}))
        assert b.next_delay(10, ExternalServiceError("svc", status_code=503)) == 30

    def test_factor_below_one_rejected(self) -> None:
        with pytest.raises(ValueError):
            RateLimitBackoff(factor=0)


class TestConstantBackoff:
    def test_never_escalates(self) -> None:
        b = ConstantBackoff()
        assert b.next_delay(100, ExternalServiceError("svc", status_code=429)) == 100
