"""Clock abstraction for testing.

Report timestamps and file names come from Time.now() so tests can pin the
instant a sweep ran.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current local time.

        Returns:
            Current local datetime
        """
        ...
