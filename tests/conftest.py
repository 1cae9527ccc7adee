"""
Whale Alert Client Test Configuration
-------------------------------------
Shared fixtures for all tests.

HTTP is stubbed with httpx.MockTransport; no test touches the network.
"""

import asyncio
import json
import sys
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from whale_alert.infra.logging import reset_logging


TRANSACTION_PAYLOAD = {
    "blockchain": "bitcoin",
    "symbol": "btc",
    "id": "1234567890",
    "transaction_type": "transfer",
    "hash": "abc",
    "from": {"address": "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa", "owner": "unknown", "owner_type": "unknown"},
    "to": {"address": "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy", "owner": "binance", "owner_type": "exchange"},
    "timestamp": 1704067200,
    "amount": 1500,
    "amount_usd": 63000000.5,
    "transaction_count": 1,
}

TRANSACTIONS_PAYLOAD = {
    "result": "success",
    "cursor": "2bc7e46-2bc7e46-5c66c0a7",
    "count": 1,
    "transactions": [TRANSACTION_PAYLOAD],
}

STATUS_PAYLOAD = {
    "result": "success",
    "blockchain_count": 2,
    "blockchains": [
        {"name": "bitcoin", "symbols": ["btc", "usdt"], "status": "connected"},
        {"name": "ethereum", "symbols": ["eth"], "status": "disconnected"},
    ],
}


class StubTransport:
    """
    Records requests and answers each with the same response.

    Pass `error` to make every request fail at the transport level.
    """

    def __init__(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes = b"",
        error: Optional[Exception] = None,
    ):
        self.requests: List[httpx.Request] = []
        self._status_code = status_code
        self._json = json
        self._content = content
        self._error = error
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._json is not None:
            return httpx.Response(self._status_code, json=self._json)
        return httpx.Response(self._status_code, content=self._content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def stub_transport() -> Callable[..., StubTransport]:
    """Factory for StubTransport instances."""
    return StubTransport


@pytest.fixture
def run() -> Callable:
    """Run a coroutine to completion."""
    return asyncio.run


@pytest.fixture(autouse=True)
def clean_logging():
    """Remove handlers a test may have configured."""
    yield
    reset_logging()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


class _StatusHandler(BaseHTTPRequestHandler):
    """Serves the status payload; paths under /slow/ answer after a delay."""

    delay_seconds = 0.5

    def do_GET(self):
        if self.path.startswith("/slow/"):
            time.sleep(self.delay_seconds)
        body = json.dumps(STATUS_PAYLOAD).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def local_api_server():
    """Real HTTP server on localhost; yields its base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _StatusHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
