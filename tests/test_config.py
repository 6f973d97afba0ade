"""Tests for client configuration and construction."""

import logging

import httpx
import pytest

from ens_discovery import (
    ClientConfig,
    ConfigurationError,
    RegistryClient,
    get_registry_client,
    reset_registry_client,
)


def test_from_env_reads_environment(monkeypatch):
    monkeypatch.setenv("DISCOVERY_API_BASE_URL", "https://registry.example.com")
    monkeypatch.setenv("DISCOVERY_API_TIMEOUT", "12.5")

    config = ClientConfig.from_env()

    assert config.api_base_url == "https://registry.example.com"
    assert config.timeout == 12.5


def test_from_env_explicit_values_win(monkeypatch):
    monkeypatch.setenv("DISCOVERY_API_BASE_URL", "https://registry.example.com")
    monkeypatch.setenv("DISCOVERY_API_TIMEOUT", "12.5")

    config = ClientConfig.from_env(api_base_url="http://localhost:3000", timeout=3.0)

    assert config.api_base_url == "http://localhost:3000"
    assert config.timeout == 3.0


def test_from_env_invalid_timeout_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("DISCOVERY_API_TIMEOUT", "soon")

    with caplog.at_level(logging.WARNING, logger="ens_discovery.config"):
        config = ClientConfig.from_env()

    assert config.timeout == 30.0
    assert config.api_base_url == ""
    assert "Invalid DISCOVERY_API_TIMEOUT" in caplog.text


@pytest.mark.parametrize("base_url", ["", "   "])
def test_empty_base_url_is_rejected(base_url):
    with pytest.raises(ConfigurationError, match="api base url is required"):
        RegistryClient(ClientConfig(api_base_url=base_url))


@pytest.mark.parametrize(
    "base_url",
    [
        "localhost:3000",
        "/api",
        "registry.example.com",
        "http://",
        "http://host:notaport",
        "http://host:99999",
        "http://:8080",
    ],
)
def test_malformed_base_url_is_rejected(base_url):
    with pytest.raises(ConfigurationError, match="invalid api base url"):
        RegistryClient(ClientConfig(api_base_url=base_url))


def test_trailing_slashes_are_stripped():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"items": [], "total": 0})

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    client = RegistryClient(
        ClientConfig(api_base_url=" http://localhost:3000/// "), http_client=http_client
    )

    assert client.base_url == "http://localhost:3000"
    client.list_services()
    assert seen == ["http://localhost:3000/api/services"]


def test_default_http_client_is_owned_and_closed():
    client = RegistryClient(ClientConfig(api_base_url="http://localhost:3000", timeout=5.0))

    assert isinstance(client._client, httpx.Client)
    assert client._client.timeout.read == 5.0

    with client:
        pass
    assert client._client.is_closed


def test_injected_http_client_is_not_closed():
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(204)))

    with RegistryClient(ClientConfig(api_base_url="http://localhost:3000"), http_client=http_client):
        pass

    assert not http_client.is_closed
    http_client.close()


def test_global_client_uses_environment(monkeypatch):
    monkeypatch.setenv("DISCOVERY_API_BASE_URL", "https://registry.example.com/")

    client = get_registry_client()

    assert client is get_registry_client()
    assert client.base_url == "https://registry.example.com"

    reset_registry_client()
    assert get_registry_client() is not client


def test_global_client_requires_base_url():
    with pytest.raises(ConfigurationError):
        get_registry_client()
