"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── AttemptsExceededError
    │   └── ConfigError      (config/validation)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        └── ExternalServiceError
"""

from resilient_http.kernel.errors.application import (
    ATTEMPTS_EXCEEDED_MESSAGE,
    ApplicationError,
    AttemptsExceededError,
)
from resilient_http.kernel.errors.base import BaseError, error_message
from resilient_http.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ATTEMPTS_EXCEEDED_MESSAGE",
    "ApplicationError",
    "AttemptsExceededError",
    "BaseError",
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
    "error_message",
]
