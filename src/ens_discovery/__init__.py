"""ENS Discovery Client

Client library for an ENS-keyed service discovery registry: resolve ENS names
to registered services, list and search services, and register new ones.
"""

__version__ = "0.1.0"

# Export shared models first (no dependencies)
from ens_discovery.models import (
    RegisteredService, ENSResolution, ServiceRegistrationRequest,
    ServiceListFilters, ServiceListResponse,
    X402DiscoveryOptions, X402DiscoveryResponse,
)

from ens_discovery.config import ClientConfig
from ens_discovery.errors import (
    DiscoveryError,
    ConfigurationError,
    InvalidInputError,
    TransportError,
    ResponseReadError,
    RequestEncodingError,
    ResponseDecodingError,
    ProtocolError,
    ResolverMismatchError,
    APIError,
)
from ens_discovery.validation import normalize_ens_name, validate_ens_name

from ens_discovery.clients import (
    RegistryClient,
    get_registry_client,
    reset_registry_client,
)

__all__ = [
    # Models
    "RegisteredService", "ENSResolution", "ServiceRegistrationRequest",
    "ServiceListFilters", "ServiceListResponse",
    "X402DiscoveryOptions", "X402DiscoveryResponse",
    # Configuration
    "ClientConfig",
    # Errors
    "DiscoveryError", "ConfigurationError", "InvalidInputError",
    "TransportError", "ResponseReadError", "RequestEncodingError",
    "ResponseDecodingError", "ProtocolError", "ResolverMismatchError",
    "APIError",
    # ENS helpers
    "normalize_ens_name",
    "validate_ens_name",
    # Client
    "RegistryClient",
    "get_registry_client",
    "reset_registry_client",
]
