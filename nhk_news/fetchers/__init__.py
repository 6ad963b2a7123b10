"""Network layer: the transport protocol and its ``requests`` implementation."""

from .http import FetchError, HttpResponse, RequestsTransport, Transport

__all__ = ["FetchError", "HttpResponse", "RequestsTransport", "Transport"]
