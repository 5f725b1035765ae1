"""HTTP transport backed by :class:`httpx.AsyncClient`.

:class:`HttpxInterface` performs one exchange per
:meth:`~HttpxInterface.perform` call while keeping the wire representation
intact in both directions:

* the outbound :class:`httpx.Request` is built directly instead of through
  :meth:`httpx.AsyncClient.build_request`, so the client's default headers
  and cookies are never merged in. Auth is disabled per send, and the method
  keeps the case the caller gave it. Only ``Host`` and
  ``Content-Length`` are added by httpx itself.
* the response is streamed and read with :meth:`httpx.Response.aiter_raw`,
  so a ``Content-Encoding`` the caller negotiated is not decoded away.
* response headers come from :attr:`httpx.Headers.raw`, preserving
  duplicates and order.

The wrapped client is the transport handle. It is shared by every clone and
owned by whoever created it.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from oauth2_http_client.exceptions import TransportError
from oauth2_http_client.interface import HttpInterface
from oauth2_http_client.models import HttpRequest, HttpResponse, TransportConfig

logger = logging.getLogger(__name__)

# Passed to send() in place of the client's auth so that neither client-level
# credentials nor URL userinfo add an Authorization header.
_NO_AUTH = httpx.Auth()


class HttpxInterface(HttpInterface):
    """Transport that sends requests through a shared :class:`httpx.AsyncClient`.

    Redirects are never followed: a 3xx is returned to the protocol engine
    as-is. Timeouts, TLS verification and pool limits are whatever the
    wrapped client was configured with.

    Args:
        client: The client handle to send through. It is not closed by
            this class unless :meth:`aclose` is called explicitly or the
            interface is used as an async context manager.

    Example::

        async with HttpxInterface.from_config(TransportConfig(timeout=10)) as interface:
            response = await OAuth2Client(interface).call(request)
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: Optional[TransportConfig] = None) -> HttpxInterface:
        """Create an interface around a new client built from *config*.

        The caller owns the new client and should close it with
        :meth:`aclose` (or ``async with``) once every exchange is done.

        Args:
            config: Transport settings. Defaults to :class:`TransportConfig`.

        Returns:
            A new :class:`HttpxInterface`.
        """
        config = config or TransportConfig()
        client = httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify_ssl,
            limits=httpx.Limits(
                max_connections=config.max_connections,
                max_keepalive_connections=config.max_keepalive_connections,
            ),
            follow_redirects=False,
        )
        return cls(client)

    @property
    def client(self) -> httpx.AsyncClient:
        """The shared client handle."""
        return self._client

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> HttpxInterface:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared client. Every clone becomes unusable."""
        await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Transport contract
    # ------------------------------------------------------------------ #

    async def perform(self, request: HttpRequest) -> HttpResponse:
        """Send *request* and return the response exactly as received.

        Raises:
            TransportError: On connection, TLS, timeout or protocol errors,
                on a URI httpx cannot parse, if the body stream breaks
                before it is fully read, and on a status outside 100..599.
        """
        try:
            outbound = httpx.Request(
                request.method,
                request.uri,
                headers=list(request.headers),
                content=request.body,
            )
            # httpx uppercases the method; HTTP method tokens are case-sensitive.
            outbound.method = request.method
            response = await self._client.send(
                outbound, stream=True, follow_redirects=False, auth=_NO_AUTH
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _transport_error(exc, request) from exc

        try:
            body = await _read_raw_body(response)
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise _transport_error(exc, request) from exc
        finally:
            await response.aclose()

        logger.debug(
            "%s %s -> %d (%d bytes)", request.method, request.uri, response.status_code, len(body)
        )
        try:
            return HttpResponse(
                status=response.status_code,
                headers=[(name.decode("latin-1"), value) for name, value in response.headers.raw],
                body=body,
            )
        except ValidationError as exc:
            raise TransportError(
                f"Malformed response: status {response.status_code}", request=request
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client={self._client!r})"


async def _read_raw_body(response: httpx.Response) -> bytes:
    """Return the undecoded body of a streamed response.

    Responses constructed in memory (e.g. by :class:`httpx.MockTransport`)
    are read and decoded eagerly, which consumes the stream for
    :meth:`httpx.Response.aiter_raw`. Their underlying byte stream can be
    replayed, so the bytes as given are read from it instead of the decoded
    :attr:`httpx.Response.content`.
    """
    if response.is_stream_consumed:
        return b"".join([chunk async for chunk in response.stream])
    return b"".join([chunk async for chunk in response.aiter_raw()])


def _transport_error(exc: Exception, request: HttpRequest) -> TransportError:
    detail = str(exc) or type(exc).__name__
    return TransportError(f"{type(exc).__name__}: {detail}", request=request)
