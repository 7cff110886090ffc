"""Production HTTP implementation using httpx."""

import logging

import httpx

from pushui.integrations.http.abc import HttpClient, HttpResponse, HttpTransportError

logger = logging.getLogger(__name__)


class RealHttpClient(HttpClient):
    """Production implementation using httpx.

    Relies on httpx's default timeout; no retries.
    """

    def get(self, url: str) -> HttpResponse:
        logger.debug("GET %s", url)
        try:
            response = httpx.get(url, follow_redirects=True)
        except httpx.HTTPError as e:
            raise HttpTransportError(url, str(e)) from e

        return HttpResponse(
            status_code=response.status_code,
            text=response.text,
            reason=response.reason_phrase,
        )
