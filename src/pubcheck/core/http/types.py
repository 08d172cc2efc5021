"""Type definitions for HTTP probes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Status and body of a completed HTTP request."""

    status_code: int
    text: str = ""

    @property
    def is_success(self) -> bool:
        """True when the status code's first digit is 2."""
        return 200 <= self.status_code < 300
