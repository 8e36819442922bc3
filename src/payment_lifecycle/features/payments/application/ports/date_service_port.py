"""Date service port (interface)."""

from abc import ABC, abstractmethod
from datetime import datetime


class DateServicePort(ABC):
    """Source of application time and date parsing."""

    @abstractmethod
    def get_application_timestamp(self) -> datetime:
        """Return the current application timestamp. Never fails."""
        pass

    @abstractmethod
    def parse_timestamp(self, value: str) -> datetime:
        """
        Parse a caller-supplied date string.

        Raises DateParseError on malformed input.
        """
        pass
