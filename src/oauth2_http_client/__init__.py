"""oauth2_http_client -- plug any async HTTP transport into an OAuth2 engine.

The package is the seam between an OAuth2 protocol engine (device
authorization, token exchange) and the library that actually moves bytes.
A transport implements :class:`HttpInterface`; :class:`OAuth2Client` wraps
it into the single-call async client the engine expects::

    from oauth2_http_client import HttpRequest, OAuth2Client
    from oauth2_http_client.transports import HttpxInterface

    async with HttpxInterface.from_config() as interface:
        client = OAuth2Client(interface)
        response = await client.call(
            HttpRequest(method="POST", uri="https://auth.example.com/device")
        )

Modules:
    models: Pydantic request/response and configuration models.
    interface: The transport contract.
    client: The engine adapter.
    protocols: The engine-side client protocol.
    config: Transport configuration loading.
    exceptions: Exception hierarchy.
    transports: Bundled transport implementations.
"""

from oauth2_http_client.client import OAuth2Client
from oauth2_http_client.exceptions import (
    ConfigError,
    InvalidUsageError,
    OAuth2HttpError,
    TransportError,
)
from oauth2_http_client.interface import HttpInterface
from oauth2_http_client.models import HttpRequest, HttpResponse, TransportConfig
from oauth2_http_client.protocols import AsyncHttpClient

__version__ = "0.1.0"

__all__ = [
    "AsyncHttpClient",
    "ConfigError",
    "HttpInterface",
    "HttpRequest",
    "HttpResponse",
    "InvalidUsageError",
    "OAuth2Client",
    "OAuth2HttpError",
    "TransportConfig",
    "TransportError",
]
