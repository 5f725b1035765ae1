"""Protocol for the protocol engine's HTTP client boundary."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from oauth2_http_client.models import HttpRequest, HttpResponse


@runtime_checkable
class AsyncHttpClient(Protocol):
    """Single-call asynchronous HTTP client expected by the protocol engine.

    The engine needs exactly one operation: given a request, produce an
    awaitable resolving to a response or raising ``error_type``. Anything
    satisfying this protocol can be handed to the engine;
    :class:`~oauth2_http_client.client.OAuth2Client` is the bundled one.
    """

    @property
    def error_type(self) -> type[Exception]:
        """Exception class raised when the exchange fails."""
        ...

    def call(self, request: HttpRequest) -> Awaitable[HttpResponse]:
        """Dispatch *request*; the awaitable resolves to the response."""
        ...
