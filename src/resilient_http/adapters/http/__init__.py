"""HTTP adapter – resilient async HTTP client."""
from resilient_http.adapters.http.retry_client import RetryingHttpClient
from resilient_http.adapters.http.spec import RequestSpec
from resilient_http.adapters.http.transport import HttpxTransport, Transport

__all__ = ["HttpxTransport", "RequestSpec", "RetryingHttpClient", "Transport"]
