"""HTTP client for the ENS service discovery registry."""

import logging
from typing import Any, Dict, Optional, Type
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ens_discovery.clients.base import BaseServiceClient
from ens_discovery.config import ClientConfig
from ens_discovery.errors import (
    InvalidInputError,
    ProtocolError,
    ResolverMismatchError,
    ResponseDecodingError,
)
from ens_discovery.models import (
    ENSResolution,
    RegisteredService,
    ServiceListFilters,
    ServiceListResponse,
    ServiceRegistrationRequest,
    X402DiscoveryOptions,
    X402DiscoveryResponse,
)
from ens_discovery.validation import (
    normalize_ens_name,
    require_absolute_url,
    require_ens_name,
    require_non_negative_int,
    validate_ens_name,
    validate_registration_request,
)

logger = logging.getLogger(__name__)

SERVICES_PATH = "/api/services"
SEARCH_PATH = "/api/services/search"
X402_RESOURCES_PATH = "/api/x402/discovery/resources"


class RegistryClient(BaseServiceClient):
    """Synchronous client for the ENS-keyed service registry API.

    Resolves ENS names to registered services, lists and searches services, and
    registers new ones. Input is validated before any request is sent; failures
    are raised as ens_discovery.errors exceptions and never retried.

    Usage:
        config = ClientConfig(api_base_url="https://registry.example.com")
        with RegistryClient(config) as client:
            service = client.get_service_by_ens_name("weather-api.eth")
            print(service.endpoint)
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize client.

        Args:
            config: Client configuration (base URL, default timeout)
            http_client: Optional httpx.Client to send requests with

        Raises:
            ConfigurationError: If the base URL is empty or not absolute
        """
        super().__init__(config=config, http_client=http_client)

    # ENS helpers are pure and exposed here for convenience
    normalize_ens_name = staticmethod(normalize_ens_name)
    validate_ens_name = staticmethod(validate_ens_name)

    def resolve_ens_name(self, ens_name: str) -> ENSResolution:
        """Resolve an ENS name to its registered service.

        Args:
            ens_name: ENS name, normalized before use (e.g. " Weather-API.ETH ")

        Returns:
            ENSResolution with the normalized name and the service

        Raises:
            InvalidInputError: If the name is empty or malformed
            ProtocolError: If the response has no service object
            ResolverMismatchError: If the service belongs to a different name
            APIError: If the registry rejects the request (e.g. 404)
        """
        normalized = require_ens_name(ens_name)

        payload = self._request_json("GET", f"{SERVICES_PATH}/{quote(normalized, safe='')}")
        service = self._parse_service(payload)

        if normalize_ens_name(service.ens_name) != normalized:
            raise ResolverMismatchError(expected=normalized, actual=service.ens_name)

        logger.debug(f"Resolved {normalized} -> {service.endpoint}")
        return ENSResolution(ens_name=normalized, service=service)

    def get_service_by_ens_name(self, ens_name: str) -> RegisteredService:
        """Resolve an ENS name and return only the service."""
        return self.resolve_ens_name(ens_name).service

    def register_service(self, request: ServiceRegistrationRequest) -> RegisteredService:
        """Register a new service.

        Args:
            request: Registration input; ensName, owner, endpoint,
                paymentScheme and network are required

        Returns:
            The service as stored by the registry

        Raises:
            InvalidInputError: Naming the first invalid field; nothing is sent
            ProtocolError: If the response has no service object
            APIError: If the registry rejects the registration
        """
        validate_registration_request(request)

        payload = self._request_json("POST", SERVICES_PATH, body=request)
        service = self._parse_service(payload)

        logger.info(f"Registered service {service.ens_name}")
        return service

    def list_services(
        self, filters: Optional[ServiceListFilters] = None
    ) -> ServiceListResponse:
        """List services, optionally filtered.

        Empty filter values are not sent. ``active`` is sent only when set.

        Returns:
            ServiceListResponse exactly as returned by the registry
        """
        filters = filters or ServiceListFilters()

        params: Dict[str, str] = {}
        for key, value in (
            ("network", filters.network),
            ("paymentScheme", filters.payment_scheme),
            ("owner", filters.owner),
        ):
            trimmed = (value or "").strip()
            if trimmed:
                params[key] = trimmed
        if filters.active is not None:
            params["active"] = "true" if filters.active else "false"

        path = SERVICES_PATH
        query = urlencode(params)
        if query:
            path = f"{path}?{query}"

        payload = self._request_json("GET", path)
        return self._parse_model(ServiceListResponse, payload)

    def search_services(self, query: str) -> ServiceListResponse:
        """Free-text search across registered services.

        Raises:
            InvalidInputError: If the query is blank; nothing is sent
        """
        needle = query.strip()
        if not needle:
            raise InvalidInputError("search query is required", field="q")

        payload = self._request_json("GET", f"{SEARCH_PATH}?{urlencode({'q': needle})}")
        return self._parse_model(ServiceListResponse, payload)

    def get_x402_discovery_resources(
        self, options: Optional[X402DiscoveryOptions] = None
    ) -> X402DiscoveryResponse:
        """List resources published by an x402 facilitator.

        Without a facilitator URL the registry uses its default facilitator.

        Args:
            options: Optional facilitatorUrl, type, limit and offset

        Returns:
            X402DiscoveryResponse with the facilitator actually queried

        Raises:
            InvalidInputError: If an option is malformed; nothing is sent
            ProtocolError: If items or facilitatorUrl are missing in the response
        """
        options = options or X402DiscoveryOptions()

        params: Dict[str, str] = {}
        if options.facilitator_url is not None:
            params["facilitatorUrl"] = require_absolute_url(
                options.facilitator_url, "facilitatorUrl"
            )
        if options.type is not None:
            resource_type = options.type.strip()
            if not resource_type:
                raise InvalidInputError("type must be non-empty", field="type")
            params["type"] = resource_type
        limit = require_non_negative_int(options.limit, "limit")
        if limit is not None:
            params["limit"] = str(limit)
        offset = require_non_negative_int(options.offset, "offset")
        if offset is not None:
            params["offset"] = str(offset)

        path = X402_RESOURCES_PATH
        query = urlencode(params)
        if query:
            path = f"{path}?{query}"

        payload = self._request_json("GET", path)
        if (
            not isinstance(payload, dict)
            or not isinstance(payload.get("items"), list)
            or not isinstance(payload.get("facilitatorUrl"), str)
        ):
            raise ProtocolError("invalid response: missing items or facilitatorUrl")
        return self._parse_model(X402DiscoveryResponse, payload)

    def _parse_service(self, payload: Any) -> RegisteredService:
        """Extract the ``service`` object from a ``{"service": {...}}`` payload."""
        if not isinstance(payload, dict) or payload.get("service") is None:
            raise ProtocolError("invalid response: missing service object")
        return self._parse_model(RegisteredService, payload["service"])

    @staticmethod
    def _parse_model(model: Type[BaseModel], payload: Any) -> Any:
        if payload is None:
            payload = {}
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ResponseDecodingError(f"decode response: {exc}") from exc


# Singleton instance for global access
_client_instance: Optional[RegistryClient] = None


def get_registry_client() -> RegistryClient:
    """Get or create the global RegistryClient instance.

    The client is configured from DISCOVERY_API_BASE_URL / DISCOVERY_API_TIMEOUT.

    Returns:
        Global RegistryClient singleton

    Raises:
        ConfigurationError: If DISCOVERY_API_BASE_URL is unset or invalid

    Example:
        ```python
        from ens_discovery.clients import get_registry_client

        client = get_registry_client()
        service = client.get_service_by_ens_name("weather-api.eth")
        ```
    """
    global _client_instance

    if _client_instance is None:
        _client_instance = RegistryClient(ClientConfig.from_env())

    return _client_instance


def reset_registry_client():
    """Close and drop the global RegistryClient instance.

    Used for testing or reconfiguration.
    """
    global _client_instance
    if _client_instance is not None:
        _client_instance.close()
    _client_instance = None
    logger.warning("RegistryClient instance reset")
