"""Abstract base class for HTTP probes against package registries."""

from abc import ABC, abstractmethod

from pubcheck.core.http.types import HttpResponse


class HttpClient(ABC):
    """Abstract interface for the GET requests a sweep issues.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get(self, url: str, *, token: str | None) -> HttpResponse | None:
        """Issue a GET request, following redirects.

        Args:
            url: Absolute URL to fetch
            token: Bearer token for the Authorization header, or None to send
                the request unauthenticated

        Returns:
            HttpResponse for any completed request (including 4xx/5xx), or
            None if the request never completed (timeout, DNS failure,
            connection refused)
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release any pooled connections. Safe to call more than once."""
        ...
