"""
Clock port interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Port interface for reading the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        pass
