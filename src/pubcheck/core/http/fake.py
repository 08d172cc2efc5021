"""Fake HTTP client for testing.

FakeHttpClient is an in-memory implementation that accepts pre-configured
responses in its constructor. Construct instances directly with keyword
arguments.
"""

from pubcheck.core.http.abc import HttpClient
from pubcheck.core.http.types import HttpResponse


class FakeHttpClient(HttpClient):
    """In-memory fake implementation of HTTP probes.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.

    Unknown URLs answer 404. URLs in `unreachable` answer None, as if the
    connection failed. When `required_token` is set, any request carrying a
    different token (or none) answers 401 before the URL is looked up.
    """

    def __init__(
        self,
        *,
        responses: dict[str, HttpResponse] | None = None,
        unreachable: set[str] | None = None,
        required_token: str | None = None,
    ) -> None:
        """Create FakeHttpClient with pre-configured state.

        Args:
            responses: Mapping of URL -> HttpResponse
            unreachable: URLs whose requests fail at the transport level
            required_token: Token every request must carry, or None for open access
        """
        self._responses = responses or {}
        self._unreachable = unreachable or set()
        self._required_token = required_token
        self._get_calls: list[tuple[str, str | None]] = []
        self._closed = False

    @property
    def get_calls(self) -> list[tuple[str, str | None]]:
        """Read-only access to tracked get() calls for test assertions.

        Returns list of (url, token) tuples.
        """
        return self._get_calls

    @property
    def closed(self) -> bool:
        """Whether close() was called. For test assertions only."""
        return self._closed

    def get(self, url: str, *, token: str | None) -> HttpResponse | None:
        self._get_calls.append((url, token))
        if url in self._unreachable:
            return None
        if self._required_token is not None and token != self._required_token:
            return HttpResponse(status_code=401, text="Unauthorized")
        return self._responses.get(url, HttpResponse(status_code=404, text="Not Found"))

    def close(self) -> None:
        self._closed = True
