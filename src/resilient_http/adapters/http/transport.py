"""HTTP adapter – Transport port and HttpxTransport."""
from __future__ import annotations

from typing import Any, Protocol

import httpx

from resilient_http.adapters.http.spec import RequestSpec
from resilient_http.kernel.errors import ConnectionError, ExternalServiceError, TimeoutError as AppTimeoutError


class Transport(Protocol):
    """Port: send one request, return the response or raise on failure."""

    async def send(self, spec: Any) -> Any: ...


class HttpxTransport:
    """Thin async httpx transport with structured error mapping.

    The base options (``base_url``, ``timeout``, ``headers``, …) are given to
    a single ``httpx.AsyncClient`` which merges them into every request.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **client_options: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **client_options)

    async def __aenter__(self) -> "HttpxTransport":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, spec: RequestSpec) -> httpx.Response:
        method, url = spec.method.upper(), spec.url
        try:
            response = await self._client.request(method, url, **spec.to_httpx_kwargs())
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                response=exc.response,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ConnectionError(url, str(exc) or None, cause=exc) from exc


__all__ = ["HttpxTransport", "Transport"]
