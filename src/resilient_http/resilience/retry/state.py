"""Resilience – RetryState value object."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class RetryState:
    """Retry bookkeeping of one in-flight request.

    ``attempts`` counts retries already scheduled, ``retry_delay`` is the
    wait in milliseconds before the next one and ``max_attempts == 0``
    removes the cap. A new value is derived for every retry; instances are
    never shared between requests.
    """

    attempts: int = 0
    retry_delay: int = 0
    max_attempts: int = 0

    def __post_init__(self) -> None:
        for name in ("attempts", "retry_delay", "max_attempts"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    @property
    def unbounded(self) -> bool:
        return self.max_attempts == 0

    @property
    def exhausted(self) -> bool:
        """``True`` once no further attempt is allowed."""
        return not self.unbounded and self.attempts >= self.max_attempts

    def advance(self, retry_delay: int) -> RetryState:
        """State for the next attempt, waiting *retry_delay* after it fails."""
        if retry_delay < self.retry_delay:
            raise ValueError("retry_delay must not decrease")
        return dataclasses.replace(self, attempts=self.attempts + 1, retry_delay=retry_delay)


__all__ = ["RetryState"]
