"""Resilience – retry bookkeeping and delay escalation."""
from resilient_http.resilience.retry.backoff import (
    RATE_LIMITED,
    BackoffStrategy,
    ConstantBackoff,
    RateLimitBackoff,
    status_code_of,
)
from resilient_http.resilience.retry.state import RetryState

__all__ = [
    "BackoffStrategy",
    "ConstantBackoff",
    "RATE_LIMITED",
    "RateLimitBackoff",
    "RetryState",
    "status_code_of",
]
