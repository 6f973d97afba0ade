"""
Wire models for the ENS discovery registry API.

Pydantic models shared by the client and its callers. Field aliases carry the
exact camelCase names used on the wire.
"""

from ens_discovery.models.service import (
    ENSResolution,
    RegisteredService,
    ServiceListFilters,
    ServiceListResponse,
    ServiceRegistrationRequest,
)
from ens_discovery.models.x402 import (
    X402DiscoveryOptions,
    X402DiscoveryResponse,
)

__all__ = [
    # Services
    "RegisteredService", "ENSResolution", "ServiceRegistrationRequest",
    "ServiceListFilters", "ServiceListResponse",
    # x402
    "X402DiscoveryOptions", "X402DiscoveryResponse",
]
