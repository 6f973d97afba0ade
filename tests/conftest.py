import json

import httpx
import pytest

from ens_discovery import ClientConfig, RegistryClient, reset_registry_client

BASE_URL = "https://registry.example.com"

SERVICE_PAYLOAD = {
    "ensName": "weather-api.eth",
    "ensNode": "0xnode",
    "owner": "0x1111111111111111111111111111111111111111",
    "endpoint": "https://api.example.com/weather",
    "paymentScheme": "exact",
    "network": "eip155:8453",
    "description": "Weather",
    "capabilities": ["forecast", "alerts"],
    "facilitatorUrl": "https://x402.org/facilitator",
    "active": True,
    "createdAt": "2026-01-01T00:00:00Z",
    "updatedAt": "2026-01-02T00:00:00Z",
}


@pytest.fixture
def service_payload() -> dict:
    return json.loads(json.dumps(SERVICE_PAYLOAD))


@pytest.fixture
def make_client():
    """Build a RegistryClient whose requests are answered by ``handler``."""
    clients = []

    def _make(handler):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return RegistryClient(ClientConfig(api_base_url=BASE_URL), http_client=http_client)

    yield _make

    for http_client in clients:
        http_client.close()


@pytest.fixture
def offline_client(make_client) -> RegistryClient:
    """A client that fails the test if it ever sends a request."""

    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail(f"unexpected request: {request.method} {request.url}")

    return make_client(handler)


@pytest.fixture(autouse=True)
def _reset_global_client(monkeypatch):
    monkeypatch.delenv("DISCOVERY_API_BASE_URL", raising=False)
    monkeypatch.delenv("DISCOVERY_API_TIMEOUT", raising=False)
    yield
    reset_registry_client()
