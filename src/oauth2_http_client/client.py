"""Engine adapter -- exposes any :class:`HttpInterface` as the engine's HTTP client.

:class:`OAuth2Client` is the only channel through which a protocol engine
reaches the network. It owns no connection state of its own: each
:meth:`~OAuth2Client.call` clones the held interface, awaits
:meth:`~oauth2_http_client.interface.HttpInterface.perform` on the clone,
and hands back the response untouched.

No retry, caching, timeout or locking happens here; those belong to the
transport. Errors are never logged or swallowed, only brought into the
interface's ``error_type`` when a transport leaks something else.

Example::

    async with HttpxInterface.from_config(load_transport_config()) as interface:
        client = OAuth2Client(interface)
        response = await client.call(request)
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from oauth2_http_client.exceptions import InvalidUsageError
from oauth2_http_client.interface import HttpInterface
from oauth2_http_client.models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

InterfaceT = TypeVar("InterfaceT", bound=HttpInterface)


class OAuth2Client(Generic[InterfaceT]):
    """Adapter bridging a transport into the engine's single-call interface.

    Safe to share between any number of concurrent exchanges: calls are
    independent and may complete in any order.

    Args:
        interface: The transport to dispatch through. The adapter keeps a
            reference to it, never exclusive ownership of its client
            handle.

    Raises:
        InvalidUsageError: If *interface* is not an
            :class:`~oauth2_http_client.interface.HttpInterface` or declares
            an ``error_type`` that is not an exception class.
    """

    def __init__(self, interface: InterfaceT) -> None:
        if not isinstance(interface, HttpInterface):
            raise InvalidUsageError(
                f"Expected an HttpInterface, got {type(interface).__name__}"
            )
        error_type = interface.error_type
        if not (isinstance(error_type, type) and issubclass(error_type, Exception)):
            raise InvalidUsageError(
                f"{type(interface).__name__}.error_type must be an Exception subclass"
            )
        self._interface = interface

    @property
    def interface(self) -> InterfaceT:
        """The transport this adapter dispatches through."""
        return self._interface

    @property
    def error_type(self) -> type[Exception]:
        """Exception class raised by :meth:`call` on transport failure."""
        return self._interface.error_type

    def call(self, request: HttpRequest) -> Awaitable[HttpResponse]:
        """Dispatch *request* through a clone of the held interface.

        The clone is taken immediately, so the returned awaitable does not
        depend on this adapter outliving it. Cancelling the task awaiting
        it abandons the exchange; cleanup of the in-flight request is left
        to the transport.

        Args:
            request: The request built by the protocol engine.

        Returns:
            An awaitable resolving to the
            :class:`~oauth2_http_client.models.HttpResponse` returned by the
            transport, unchanged. Non-2xx statuses resolve normally.

        Raises:
            TransportError: (or the interface's ``error_type``) when the
                exchange fails, raised on await.
        """
        # Failures are reported in terms of the held interface, whatever
        # class its clone turns out to be.
        held = self._interface
        return _dispatch(held.clone(), request, held.error_type, held.to_transport_error)

    __call__ = call

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._interface!r})"


async def _dispatch(
    interface: HttpInterface,
    request: HttpRequest,
    error_type: type[Exception],
    convert: Callable[[Exception], Exception],
) -> HttpResponse:
    logger.debug(
        "Dispatching %s %s via %s", request.method, request.uri, type(interface).__name__
    )
    try:
        response = await interface.perform(request)
    except error_type:
        raise
    except Exception as exc:
        raise convert(exc) from exc

    if not isinstance(response, HttpResponse):
        raise convert(
            TypeError(
                f"{type(interface).__name__}.perform returned {type(response).__name__}, "
                "expected HttpResponse"
            )
        )
    return response
