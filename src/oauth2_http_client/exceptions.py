"""Exception hierarchy for oauth2_http_client.

All exceptions inherit from :class:`OAuth2HttpError`. The seam recognises
exactly one failure kind at runtime, :class:`TransportError`; the other
subclasses report misuse of the API or bad configuration and are raised
before any network I/O happens.

Subclass hierarchy::

    OAuth2HttpError
    +-- TransportError      (DNS, connect, TLS, I/O, malformed response)
    +-- InvalidUsageError   (adapter constructed with an unusable interface)
    +-- ConfigError         (unreadable or invalid transport configuration)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from oauth2_http_client.models import HttpRequest


class OAuth2HttpError(Exception):
    """Base exception for all oauth2_http_client errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(OAuth2HttpError):
    """Raised when an HTTP exchange could not be completed.

    Covers every network-level failure: DNS resolution, connection refused,
    TLS handshake, I/O timeout, and responses that could not be assembled.
    A non-2xx status is *not* a transport error.

    Args:
        message: Description of the underlying failure.
        request: The request that failed, when known.
    """

    def __init__(self, message: str, request: Optional[HttpRequest] = None):
        super().__init__(message)
        self.request = request

    def __str__(self) -> str:
        if self.request is None:
            return self.message
        return f"{self.request.method} {self.request.uri}: {self.message}"


class InvalidUsageError(OAuth2HttpError):
    """Raised when the adapter is given an object that cannot act as a transport."""


class ConfigError(OAuth2HttpError):
    """Raised for configuration problems (unreadable file, invalid JSON, bad values)."""
