import os
import sys
import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock

# Ensure src and the tests dir (for test_utils) are importable without install
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))
sys.path.insert(0, os.path.dirname(__file__))

from near_rpc.client import NearClient
from near_rpc.helpers import run_coroutine


@pytest.fixture
def make_client():
    """Build NearClients whose HTTP goes to a handler instead of the network.

    `make_client(handler)` returns the client; every request the handler saw
    is appended to `make_client.requests`.
    """

    http_clients = []
    seen = []

    def factory(handler):
        def recording(request):
            seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        http_clients.append(http)
        return NearClient("https://rpc.testnet.near.org", http_client=http)

    factory.requests = seen
    yield factory

    for http in http_clients:
        run_coroutine(http.aclose())


@pytest.fixture
def mock_transport():
    """A NearClient over a mocked transport; returns (client, transport)."""
    transport = MagicMock()
    transport.base_url = "https://rpc.testnet.near.org"
    transport.call = AsyncMock()
    transport.aclose = AsyncMock()
    return NearClient(transport=transport), transport
