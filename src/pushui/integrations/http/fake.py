"""Fake HTTP implementation for testing.

FakeHttpClient serves canned responses from memory and records every URL
requested, so tests can assert on network access.
"""

from pushui.integrations.http.abc import HttpClient, HttpResponse, HttpTransportError


class FakeHttpClient(HttpClient):
    """In-memory fake implementation serving canned responses.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        responses: dict[str, HttpResponse | str] | None = None,
        transport_errors: set[str] | None = None,
    ) -> None:
        """Create FakeHttpClient with pre-configured responses.

        Args:
            responses: Mapping of URL to response. A plain string is served as a
                200 response with that body. Unknown URLs return 404.
            transport_errors: URLs that fail with HttpTransportError
        """
        self._responses = responses if responses is not None else {}
        self._transport_errors = transport_errors if transport_errors is not None else set()
        self._requested_urls: list[str] = []

    @property
    def requested_urls(self) -> list[str]:
        """Get the list of URLs requested, in order.

        This property is for test assertions only.
        """
        return self._requested_urls

    def get(self, url: str) -> HttpResponse:
        self._requested_urls.append(url)

        if url in self._transport_errors:
            raise HttpTransportError(url, "connection refused")

        if url not in self._responses:
            return HttpResponse(status_code=404, text="Not Found", reason="Not Found")

        response = self._responses[url]
        if isinstance(response, str):
            return HttpResponse(status_code=200, text=response, reason="OK")
        return response
