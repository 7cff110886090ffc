"""Fake Time implementation for testing.

FakeTime is an in-memory implementation that always reports the same instant,
enabling deterministic cache-age and timestamp assertions.
"""

from datetime import UTC, datetime

from pushui.integrations.time.abc import Time

DEFAULT_FAKE_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


class FakeTime(Time):
    """In-memory fake implementation with a frozen clock.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, now: datetime = DEFAULT_FAKE_NOW) -> None:
        """Create FakeTime frozen at the given instant.

        Args:
            now: Timezone-aware datetime reported by now() and time()
        """
        self._now = now

    def time(self) -> float:
        return self._now.timestamp()

    def now(self) -> datetime:
        return self._now
