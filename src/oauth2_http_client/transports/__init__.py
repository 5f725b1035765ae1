"""Bundled :class:`~oauth2_http_client.interface.HttpInterface` implementations.

Classes:
    :class:`HttpxInterface` -- non-blocking transport backed by
    :class:`httpx.AsyncClient`.

Any other HTTP library can be plugged in by subclassing
:class:`~oauth2_http_client.interface.HttpInterface`; nothing in the adapter
depends on this package.
"""

from oauth2_http_client.transports.httpx_transport import HttpxInterface

__all__ = ["HttpxInterface"]
