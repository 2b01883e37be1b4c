"""Config settings – Settings base class and ClientSettings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from resilient_http.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ClientSettings(Settings):
    """Process-wide configuration of a :class:`RetryingHttpClient`.

    ``default_retry_delay`` is in milliseconds; ``default_max_number_attempts``
    of ``0`` removes the attempt cap.
    """

    _prefix: ClassVar[str] = "HTTP_CLIENT"

    base_url: str = ""
    timeout: float = 10.0
    default_retry_delay: int = 5000
    default_max_number_attempts: int = 3

    def _validate(self) -> None:
        for name in ("timeout", "default_retry_delay", "default_max_number_attempts"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidSettingValueError(name, value, "must be >= 0")

    def transport_options(self) -> dict[str, Any]:
        """Keyword options for the underlying ``httpx.AsyncClient``."""
        return {"base_url": self.base_url, "timeout": self.timeout}


__all__ = ["ClientSettings", "Settings"]
