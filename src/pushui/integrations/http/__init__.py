from pushui.integrations.http.abc import HttpClient, HttpResponse, HttpTransportError
from pushui.integrations.http.fake import FakeHttpClient
from pushui.integrations.http.real import RealHttpClient

__all__ = [
    "FakeHttpClient",
    "HttpClient",
    "HttpResponse",
    "HttpTransportError",
    "RealHttpClient",
]
