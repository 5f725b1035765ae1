"""Shared test fixtures for oauth2_http_client.

Provides request builders, in-process mock transports built on
:class:`httpx.MockTransport`, and a real loopback HTTP server for checks
that need an actual socket. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import gzip
import json
import socket
import threading
import time
from collections.abc import Callable, Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from oauth2_http_client.models import HttpRequest
from oauth2_http_client.transports import HttpxInterface


DEVICE_AUTHORIZATION_BODY = (
    b'{"device_code":"abc","user_code":"XYZ","verification_uri":"https://x/verify",'
    b'"expires_in":1800,"interval":5}'
)


# ---------------------------------------------------------------------------
# Request / transport helpers
# ---------------------------------------------------------------------------


def make_request(
    method: str = "GET",
    uri: str = "https://auth.example.com/device",
    headers: Any = (),
    body: bytes = b"",
) -> HttpRequest:
    return HttpRequest(method=method, uri=uri, headers=headers, body=body)


def mock_interface(
    handler: Callable[[httpx.Request], Any],
) -> HttpxInterface:
    """Create an HttpxInterface whose client answers from *handler*."""
    return HttpxInterface(httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.fixture
def request_factory() -> Callable[..., HttpRequest]:
    return make_request


@pytest.fixture
def mock_interface_factory() -> Callable[..., HttpxInterface]:
    return mock_interface


@pytest.fixture
def device_authorization_body() -> bytes:
    return DEVICE_AUTHORIZATION_BODY


# ---------------------------------------------------------------------------
# Loopback HTTP server
# ---------------------------------------------------------------------------


class _Handler(BaseHTTPRequestHandler):
    """Routes used by the integration tests.

    ``/device``     -- fixed device authorization JSON
    ``/echo``       -- JSON description of the received request
    ``/status/N``   -- status N with an empty body
    ``/gzip``       -- gzip-compressed body with ``Content-Encoding: gzip``
    ``/cookies``    -- two ``Set-Cookie`` headers
    ``/token?id=X`` -- body ``token-X`` after a short delay
    """

    def log_message(self, format: str, *args: Any) -> None:
        pass

    def _read_body(self) -> bytes:
        length = int(self.headers.get("Content-Length") or 0)
        return self.rfile.read(length) if length else b""

    def _reply(self, status: int, body: bytes, headers: tuple[tuple[str, str], ...] = ()) -> None:
        self.send_response(status)
        for name, value in headers:
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _route(self) -> None:
        body = self._read_body()
        url = urlsplit(self.path)

        if url.path == "/device":
            self._reply(200, DEVICE_AUTHORIZATION_BODY, (("Content-Type", "application/json"),))
        elif url.path == "/echo":
            payload = {
                "method": self.command,
                "headers": [[name, value] for name, value in self.headers.items()],
                "body": body.hex(),
            }
            self._reply(200, json.dumps(payload).encode(), (("Content-Type", "application/json"),))
        elif url.path.startswith("/status/"):
            self._reply(int(url.path.rsplit("/", 1)[1]), b"")
        elif url.path == "/gzip":
            self._reply(200, gzip.compress(b"compressed payload"), (("Content-Encoding", "gzip"),))
        elif url.path == "/cookies":
            self._reply(200, b"", (("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")))
        elif url.path == "/token":
            token = parse_qs(url.query)["id"][0]
            time.sleep(0.01)
            self._reply(200, f"token-{token}".encode())
        else:
            self._reply(404, b"not found")

    do_GET = _route
    do_POST = _route
    do_PUT = _route
    do_DELETE = _route


class _Server(ThreadingHTTPServer):
    request_queue_size = 128
    daemon_threads = True


@pytest.fixture
def http_server() -> Iterator[str]:
    """Run a threaded loopback HTTP server and yield its base URL."""
    server = _Server(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def unused_port() -> int:
    """Return a loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
