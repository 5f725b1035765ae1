"""Abstract base class for pluggable HTTP transports.

:class:`HttpInterface` is the single capability a network backend must
provide to be driven by :class:`~oauth2_http_client.client.OAuth2Client`:
perform one HTTP exchange asynchronously and return the response, or raise
one opaque transport error.

To implement a new transport, subclass :class:`HttpInterface` and implement
:meth:`~HttpInterface.perform`. Override :meth:`~HttpInterface.clone` when a
shallow copy would not share the underlying client handle, and
:attr:`~HttpInterface.error_type` / :meth:`~HttpInterface.to_transport_error`
when the engine should see a custom error class.

See Also:
    :mod:`oauth2_http_client.transports` for the bundled implementations.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import ClassVar

from oauth2_http_client.exceptions import TransportError
from oauth2_http_client.models import HttpRequest, HttpResponse


class HttpInterface(ABC):
    """Abstract base class for HTTP transports.

    Instances are lightweight handles around a shared client object (a
    connection pool, a session). A single instance, and every clone of it,
    may be used by many concurrent tasks at once; any synchronisation the
    underlying client needs is the implementation's responsibility.
    """

    error_type: ClassVar[type[Exception]] = TransportError
    """Exception class surfaced to the protocol engine on failure."""

    @abstractmethod
    async def perform(self, request: HttpRequest) -> HttpResponse:
        """Send *request* and return the peer's response.

        The request is not validated up front. Whatever the underlying
        library rejects (unknown scheme, malformed URI, unsupported
        method) is reported as an :attr:`error_type` instance.

        Args:
            request: The request to send. Every header and every body byte
                must reach the wire unmodified.

        Returns:
            An :class:`~oauth2_http_client.models.HttpResponse` holding the
            status, headers and body exactly as received. Non-2xx statuses
            are returned, not raised.

        Raises:
            TransportError: (or :attr:`error_type`) if the exchange could
                not be established, sent, or fully received.
        """
        ...

    def clone(self) -> HttpInterface:
        """Return a duplicate that shares this interface's client handle.

        The default is a shallow copy, which keeps references to the same
        client object.
        """
        return copy.copy(self)

    def to_transport_error(self, exc: Exception) -> Exception:
        """Convert an exception leaked by :meth:`perform` into :attr:`error_type`.

        The default wraps it in a :class:`TransportError` named after the
        original. Subclasses with a custom :attr:`error_type` must override
        this so the result is an instance of that type.

        Args:
            exc: An exception that is not already an :attr:`error_type`.

        Returns:
            The exception to raise in its place.
        """
        detail = str(exc) or type(exc).__name__
        return TransportError(f"{type(exc).__name__}: {detail}")
