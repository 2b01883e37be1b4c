"""
resilient_http – asynchronous HTTP client with retry and rate-limit backoff.

Import path convention::

    from resilient_http.adapters.http import RetryingHttpClient, RequestSpec
    from resilient_http.kernel.errors import AttemptsExceededError
    from resilient_http.config.settings import ClientSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
