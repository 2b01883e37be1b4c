"""HTTP adapter – RetryingHttpClient."""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from resilient_http.adapters.http.spec import RequestSpec
from resilient_http.adapters.http.transport import HttpxTransport, Transport
from resilient_http.config.settings import ClientSettings
from resilient_http.config.validation import InvalidSettingValueError
from resilient_http.kernel.errors import AttemptsExceededError, error_message
from resilient_http.observability.logging import Logger, get_logger
from resilient_http.resilience.retry import BackoffStrategy, RateLimitBackoff, RetryState

Sleep = Callable[[float], Awaitable[Any]]


class RetryingHttpClient:
    """HTTP client that retries every failed attempt until it succeeds or runs out.

    Any exception raised by the transport counts as a failed attempt; a 429
    response doubles the delay used from the following retry onwards.
    Delays are in milliseconds. ``default_max_number_attempts=0`` retries
    without limit.

    Parameters
    ----------
    transport:
        Object with ``async send(spec)``. Built from *transport_config* as an
        :class:`HttpxTransport` when omitted.
    transport_config:
        Base options for the ``httpx.AsyncClient`` (``base_url``, ``headers``,
        ``timeout``, …).
    logger:
        Receives an error entry per failure and debug entries per retry.
    backoff:
        Delay escalation; defaults to :class:`RateLimitBackoff`.
    sleep:
        Coroutine function taking seconds; defaults to :func:`asyncio.sleep`.

    Example
    -------
    ::

        async with RetryingHttpClient(transport_config={"base_url": "http://svc"}) as client:
            response = await client.get("/devices", max_attempts=0)
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        transport_config: dict[str, Any] | None = None,
        logger: Logger | None = None,
        default_retry_delay: int = 5000,
        default_max_number_attempts: int = 3,
        backoff: BackoffStrategy | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        if transport is not None and transport_config:
            raise ValueError("Pass either a transport or transport_config, not both")
        if default_retry_delay < 0:
            raise InvalidSettingValueError("default_retry_delay", default_retry_delay, "must be >= 0")
        if default_max_number_attempts < 0:
            raise InvalidSettingValueError(
                "default_max_number_attempts", default_max_number_attempts, "must be >= 0"
            )
        self._transport = transport if transport is not None else HttpxTransport(**(transport_config or {}))
        self._logger = logger or get_logger(__name__)
        self._default_retry_delay = default_retry_delay
        self._default_max_number_attempts = default_max_number_attempts
        self._backoff = backoff or RateLimitBackoff()
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, *, logger: Logger | None = None, **kwargs: Any
    ) -> "RetryingHttpClient":
        return cls(
            transport_config=settings.transport_options(),
            logger=logger,
            default_retry_delay=settings.default_retry_delay,
            default_max_number_attempts=settings.default_max_number_attempts,
            **kwargs,
        )

    @property
    def default_retry_delay(self) -> int:
        return self._default_retry_delay

    @property
    def default_max_number_attempts(self) -> int:
        return self._default_max_number_attempts

    async def __aenter__(self) -> "RetryingHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def request(
        self,
        spec: Any,
        retry_delay: int | None = None,
        max_attempts: int | None = None,
    ) -> Any:
        """Send *spec*, retrying failures; return the transport's response.

        *retry_delay* falls back to the default when omitted or ``0``;
        *max_attempts* only when omitted, so an explicit ``0`` means unbounded.

        Raises:
            AttemptsExceededError: every allowed attempt failed.
        """
        state = RetryState(
            attempts=0,
            retry_delay=retry_delay or self._default_retry_delay,
            max_attempts=self._default_max_number_attempts if max_attempts is None else max_attempts,
        )
        while True:
            try:
                return await self._transport.send(spec)
            except Exception as exc:  # noqa: BLE001
                state = await self._retry(exc, state)

    async def _retry(self, failure: Exception, state: RetryState) -> RetryState:
        next_state = state.advance(self._backoff.next_delay(state.retry_delay, failure))
        if next_state.exhausted:
            raise AttemptsExceededError(
                attempts=next_state.attempts,
                max_attempts=next_state.max_attempts,
                cause=failure,
            ) from failure

        self._logger.error(error_message(failure))
        self._logger.debug(f"Retrying in {state.retry_delay}", retry_delay=state.retry_delay)
        await self._sleep(state.retry_delay / 1000)
        self._logger.debug(
            f"Retrying request - attempt:{next_state.attempts}.", attempt=next_state.attempts
        )
        return next_state

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self._verb("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Any:
        return await self._verb("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Any:
        return await self._verb("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> Any:
        return await self._verb("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self._verb("DELETE", url, **kwargs)

    async def _verb(
        self,
        method: str,
        url: str,
        *,
        retry_delay: int | None = None,
        max_attempts: int | None = None,
        **options: Any,
    ) -> Any:
        return await self.request(RequestSpec(method, url, **options), retry_delay, max_attempts)


__all__ = ["RetryingHttpClient"]
