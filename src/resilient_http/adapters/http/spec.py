"""HTTP adapter – RequestSpec."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping


@dataclasses.dataclass(frozen=True)
class RequestSpec:
    """Description of one HTTP call, replayed unchanged on every attempt.

    Fields left as ``None`` fall back to the transport's base configuration
    (base URL, default headers, timeout).
    """

    method: str
    url: str
    params: Mapping[str, Any] | None = None
    headers: Mapping[str, str] | None = None
    json: Any = None
    content: bytes | str | None = None
    data: Mapping[str, Any] | None = None
    timeout: float | None = None

    def to_httpx_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.request`` besides method/url."""
        return {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(self)
            if field.name not in ("method", "url") and getattr(self, field.name) is not None
        }


__all__ = ["RequestSpec"]
