"""Resilience – retry state and backoff strategies."""

from resilient_http.resilience.retry import BackoffStrategy, ConstantBackoff, RateLimitBackoff, RetryState

__all__ = ["BackoffStrategy", "ConstantBackoff", "RateLimitBackoff", "RetryState"]
