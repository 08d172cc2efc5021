"""Production implementation of HTTP probes using httpx."""

import logging
import threading

import httpx

from pubcheck.core.http.abc import HttpClient
from pubcheck.core.http.types import HttpResponse

logger = logging.getLogger(__name__)


class RealHttpClient(HttpClient):
    """HTTP client backed by a shared httpx.Client.

    The underlying client is created on first use and is safe to share across
    the sweep's worker threads.
    """

    def __init__(self, timeout: float, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize RealHttpClient.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional transport override (tests pass httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    def _ensure_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self._timeout,
                    follow_redirects=True,
                    transport=self._transport,
                )
            return self._client

    def get(self, url: str, *, token: str | None) -> HttpResponse | None:
        """Issue a GET request and capture status and body.

        Note: Uses try/except as an acceptable error boundary. Transport
        failures and headers httpx cannot encode (a non-ASCII token) are
        reported as None so callers can degrade instead of abort.
        """
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = self._ensure_client().get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.debug("GET %s failed: %s: %s", url, type(e).__name__, e)
            return None

        logger.debug("GET %s -> %d", url, response.status_code)
        return HttpResponse(status_code=response.status_code, text=response.text)

    def close(self) -> None:
        """Close the pooled httpx client, if one was created."""
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
