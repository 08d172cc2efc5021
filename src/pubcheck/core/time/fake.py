"""Fake Time implementation for testing.

FakeTime returns a fixed instant and counts how often it was asked.
"""

from datetime import datetime

from pubcheck.core.time.abc import Time


class FakeTime(Time):
    """In-memory fake clock that never advances.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, current: datetime | None = None) -> None:
        """Create FakeTime pinned to a given instant.

        Args:
            current: Instant to return from now(). Defaults to 2024-01-15 14:30:00.
        """
        self._current = current or datetime(2024, 1, 15, 14, 30, 0)
        self._now_calls = 0

    @property
    def now_calls(self) -> int:
        """Number of now() calls made.

        This property is for test assertions only.
        """
        return self._now_calls

    def now(self) -> datetime:
        """Return the configured instant."""
        self._now_calls += 1
        return self._current
