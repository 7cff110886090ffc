"""Real time implementation using the system clock."""

import time
from datetime import UTC, datetime

from pushui.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation using the system clock."""

    def time(self) -> float:
        return time.time()

    def now(self) -> datetime:
        return datetime.now(UTC)
