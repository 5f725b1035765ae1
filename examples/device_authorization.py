"""Example: request a device code through OAuth2Client.

Sends the first leg of the OAuth2 Device Authorization Grant (RFC 8628)
through a custom transport that reports each exchange on stderr, then
prints the fields a user needs to complete the login. Polling the token
endpoint is the protocol engine's job and is not shown.

Usage::

    python examples/device_authorization.py https://auth.example.com/device my-client-id
"""

from __future__ import annotations

import asyncio
import json
import sys
from urllib.parse import urlencode

from oauth2_http_client import HttpRequest, HttpResponse, OAuth2Client
from oauth2_http_client.config import load_transport_config
from oauth2_http_client.transports import HttpxInterface


class ReportingInterface(HttpxInterface):
    """httpx transport that echoes each exchange to stderr."""

    async def perform(self, request: HttpRequest) -> HttpResponse:
        print(f"[example] {request.method} {request.uri}", file=sys.stderr)
        response = await super().perform(request)
        print(f"[example] Response: {response.status}", file=sys.stderr)
        return response


async def request_device_code(
    client: OAuth2Client, url: str, client_id: str, scopes: list[str]
) -> dict[str, object]:
    body = urlencode({"client_id": client_id, "scope": " ".join(scopes)}).encode()
    response = await client.call(
        HttpRequest(
            method="POST",
            uri=url,
            headers=[
                ("Content-Type", b"application/x-www-form-urlencoded"),
                ("Accept", b"application/json"),
            ],
            body=body,
        )
    )
    if not response.is_success:
        raise SystemExit(f"Device authorization failed with HTTP {response.status}")
    return json.loads(response.body)


async def main(url: str, client_id: str) -> None:
    interface = ReportingInterface.from_config(load_transport_config())
    async with interface:
        client = OAuth2Client(interface)
        data = await request_device_code(client, url, client_id, ["scope1", "scope2"])

    print(f"Device Code: {data['device_code']}")
    print(f"User Code: {data['user_code']}")
    print(f"Verification URI: {data['verification_uri']}")
    print(f"Expires In: {data['expires_in']} seconds")
    print(f"Interval: {data.get('interval', 5)} seconds")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        raise SystemExit(__doc__)
    asyncio.run(main(sys.argv[1], sys.argv[2]))
