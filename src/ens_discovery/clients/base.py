"""Base HTTP client for the registry API."""

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ens_discovery.config import ClientConfig
from ens_discovery.errors import (
    APIError,
    ConfigurationError,
    RequestEncodingError,
    ResponseDecodingError,
    ResponseReadError,
    TransportError,
)
from ens_discovery.models.errors import ErrorEnvelope
from ens_discovery.validation import is_absolute_url

logger = logging.getLogger(__name__)


class BaseServiceClient:
    """Base class for synchronous JSON-over-HTTP API clients.

    Owns base URL validation, the HTTP client lifecycle, and the single
    request/response helper every operation goes through.

    Usage:
        class RegistryClient(BaseServiceClient):
            def get_thing(self, thing_id: str) -> Thing:
                payload = self._request_json("GET", f"/api/things/{thing_id}")
                return Thing.model_validate(payload)
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize service client.

        Args:
            config: Client configuration; api_base_url must be an absolute URL
            http_client: HTTP transport to use. When omitted a default
                httpx.Client is created (and closed by close()).

        Raises:
            ConfigurationError: If the base URL is missing or not absolute
        """
        base_url = (config.api_base_url or "").strip()
        if not base_url:
            raise ConfigurationError("api base url is required")
        if not is_absolute_url(base_url):
            raise ConfigurationError(f"invalid api base url: {config.api_base_url!r}")
        try:
            httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"invalid api base url: {config.api_base_url!r}") from exc

        self.base_url = base_url.rstrip("/")
        self.timeout = config.timeout

        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else self._create_client()

        logger.info(f"Initialized {self.__class__.__name__} with base_url={self.base_url}")

    def _create_client(self) -> httpx.Client:
        """Create the default HTTP client with the configured timeout."""
        return httpx.Client(timeout=self.timeout)

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
        }

    def _request_json(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> Any:
        """Send a JSON request and return the decoded JSON response.

        Args:
            method: HTTP method
            path: Path (with query string, already encoded) relative to base_url
            body: Optional request body; pydantic models are dumped by alias

        Returns:
            Decoded JSON, or None when the body is empty

        Raises:
            RequestEncodingError: If the body cannot be serialized
            TransportError: If the request cannot be built or fails on the network
            ResponseReadError: If the response body cannot be read
            APIError: If the server responds outside 2xx
            ResponseDecodingError: If a 2xx body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        content = self._encode_body(body) if body is not None else None

        try:
            request = self._client.build_request(
                method, url, content=content, headers=self._headers()
            )
        except httpx.InvalidURL as exc:
            raise TransportError(f"create request: {exc}") from exc

        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError(f"perform request: {exc}") from exc

        try:
            raw = response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise ResponseReadError(f"read response: {exc}") from exc
        finally:
            response.close()

        logger.debug(f"{method} {url} -> {response.status_code}")

        if not 200 <= response.status_code < 300:
            raise decode_api_error(response.status_code, raw)

        if not raw:
            return None

        try:
            return json.loads(raw)
        except ValueError as exc:
            raise ResponseDecodingError(f"decode response: {exc}") from exc

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        try:
            if isinstance(body, BaseModel):
                body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
            return json.dumps(body).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestEncodingError(f"marshal request body: {exc}") from exc

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def decode_api_error(status_code: int, raw: bytes) -> APIError:
    """Build an APIError from a non-2xx response body.

    The error envelope is ``{"error": {"code", "message", "details"}}`` with
    every field optional. Bodies that are not such an envelope are kept
    verbatim (trimmed) as raw_body.
    """
    trimmed = raw.decode("utf-8", errors="replace").strip()
    if not trimmed:
        return APIError(status_code)

    try:
        envelope = ErrorEnvelope.model_validate_json(trimmed)
    except PydanticValidationError:
        return APIError(status_code, raw_body=trimmed)

    if envelope.error is None:
        return APIError(status_code, raw_body=trimmed)

    return APIError(
        status_code,
        code=envelope.error.code,
        message=envelope.error.message,
        details=envelope.error.details,
        raw_body=trimmed,
    )
