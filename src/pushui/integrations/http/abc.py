"""HTTP transport abstraction.

Registry access goes through this interface so tests can serve manifests and
component files from memory.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class HttpTransportError(Exception):
    """Raised when a request fails before any response is received."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Request to {url} failed: {detail}")


@dataclass(frozen=True)
class HttpResponse:
    """Response to a GET request."""

    status_code: int
    text: str
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpClient(ABC):
    """Abstract HTTP operations for dependency injection."""

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """Issue a GET request.

        Args:
            url: Absolute URL to fetch

        Returns:
            HttpResponse for any status code (non-2xx is not raised)

        Raises:
            HttpTransportError: If no response could be obtained (DNS, connect, timeout)
        """
        ...
