"""Time operations abstraction for testing.

This module provides an ABC for clock operations so cache freshness and
installation timestamps can be controlled in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def time(self) -> float:
        """Return the current time as seconds since the epoch.

        Comparable with file modification times from os.stat().
        """
        ...

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
