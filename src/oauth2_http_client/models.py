"""Canonical Pydantic models shared across all oauth2_http_client modules.

The models fall into two groups:

**Exchange models** -- the abstract HTTP request/response pair that crosses
the boundary between the protocol engine and a transport:
    :class:`HttpRequest` and :class:`HttpResponse`.

**Configuration models** -- settings consumed by the bundled transports:
    :class:`TransportConfig`.

Exchange models are frozen. Headers are kept as an ordered sequence of
``(name, value)`` pairs rather than a mapping so that repeated headers and
their relative order survive the round trip. Names compare
case-insensitively on lookup but are stored as given; values are opaque
bytes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

HeaderList = tuple[tuple[str, bytes], ...]


def _coerce_headers(value: Any) -> Any:
    """Accept a mapping as shorthand for a single-valued header list."""
    if isinstance(value, Mapping):
        return tuple(value.items())
    return value


class _HeaderAccess:
    """Case-insensitive lookups over a ``headers`` tuple."""

    def header(self, name: str) -> Optional[bytes]:
        """Return the first value for *name*, or ``None`` if absent."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def header_values(self, name: str) -> list[bytes]:
        """Return every value for *name* in wire order."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]


# --- Exchange models ---


class HttpRequest(_HeaderAccess, BaseModel):
    """An outbound HTTP request built by the protocol engine.

    The adapter and transports only read it. Nothing here is validated
    beyond types: an unsupported method or a malformed URI is reported by
    the transport as a :class:`~oauth2_http_client.exceptions.TransportError`
    once the request is actually attempted.

    Example::

        HttpRequest(
            method="POST",
            uri="https://auth.example.com/device",
            headers=[("Content-Type", b"application/x-www-form-urlencoded")],
            body=b"client_id=cli&scope=openid",
        )
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(description="HTTP method token, sent verbatim")
    uri: str = Field(description="Absolute target URI")
    headers: HeaderList = Field(
        default=(), description="Ordered (name, value) pairs; duplicates allowed"
    )
    body: bytes = Field(default=b"", description="Raw request body")

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, value: Any) -> Any:
        return _coerce_headers(value)


class HttpResponse(_HeaderAccess, BaseModel):
    """An HTTP response exactly as the network peer sent it.

    Constructed once by a transport and never mutated afterwards. Any
    status in the 100..599 range is a valid response, including 4xx and
    5xx: interpreting error statuses is the protocol engine's job.
    """

    model_config = ConfigDict(frozen=True)

    status: int = Field(ge=100, le=599, description="HTTP status code")
    headers: HeaderList = Field(default=())
    body: bytes = Field(default=b"")

    @field_validator("headers", mode="before")
    @classmethod
    def coerce_headers(cls, value: Any) -> Any:
        return _coerce_headers(value)

    @property
    def is_success(self) -> bool:
        """Whether the status is in the 2xx range."""
        return 200 <= self.status < 300


# --- Transport configuration ---


class TransportConfig(BaseModel):
    """Settings for transports that build their own client handle.

    These belong to the transport, not to the adapter: the adapter never
    enforces timeouts or pooling itself.
    """

    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    max_connections: int = Field(default=100, ge=1, description="Connection pool size")
    max_keepalive_connections: int = Field(
        default=20, ge=0, description="Idle connections kept alive in the pool"
    )
