"""HTTP clients for the discovery registry API."""

from ens_discovery.clients.base import BaseServiceClient, decode_api_error
from ens_discovery.clients.registry_client import (
    RegistryClient,
    get_registry_client,
    reset_registry_client,
)

__all__ = [
    "BaseServiceClient",
    "RegistryClient",
    "decode_api_error",
    "get_registry_client",
    "reset_registry_client",
]
