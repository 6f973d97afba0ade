"""Exception types raised by the ENS discovery client.

Every failure surfaces to the caller as a subclass of DiscoveryError:
- ConfigurationError: invalid client configuration (construction time)
- InvalidInputError: caller input rejected before any network call
- TransportError / ResponseReadError: network failures
- RequestEncodingError / ResponseDecodingError: JSON (de)serialization failures
- ProtocolError / ResolverMismatchError: server broke the response contract
- APIError: server answered with a non-2xx status
"""

from typing import Any, Dict, List, Optional, Union

JSONValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]


class DiscoveryError(Exception):
    """Base class for all errors raised by ens_discovery."""


class ConfigurationError(DiscoveryError, ValueError):
    """Raised when the client configuration (base URL, env) is invalid."""


class InvalidInputError(DiscoveryError, ValueError):
    """Raised when caller input fails validation before any request is sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TransportError(DiscoveryError):
    """Raised when the HTTP request could not be performed."""


class ResponseReadError(TransportError):
    """Raised when the response body could not be read."""


class RequestEncodingError(DiscoveryError):
    """Raised when the request body cannot be serialized to JSON."""


class ResponseDecodingError(DiscoveryError):
    """Raised when a successful response body is not the expected JSON."""


class ProtocolError(DiscoveryError):
    """Raised when a well-formed response is missing expected fields."""


class ResolverMismatchError(ProtocolError):
    """Raised when the registry resolves a name to a service for another name."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            f"resolver mismatch: expected ens name {expected!r}, got {actual!r}"
        )
        self.expected = expected
        self.actual = actual


class APIError(DiscoveryError):
    """Error reported by the registry API (any non-2xx response).

    Structured fields are kept for programmatic handling; str() renders a
    single line for humans.

    Attributes:
        status_code: HTTP status code
        code: Machine-readable error code, if the server sent one
        message: Human-readable message, if the server sent one
        details: Server-defined detail values keyed by name
        raw_body: Trimmed response body, kept for diagnostics
    """

    def __init__(
        self,
        status_code: int,
        code: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, JSONValue]] = None,
        raw_body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details: Dict[str, JSONValue] = dict(details or {})
        self.raw_body = raw_body
        super().__init__(self._render())

    def _render(self) -> str:
        base = f"request failed ({self.status_code})"
        if self.code and self.message:
            return f"{base}: {self.code} - {self.message}"
        if self.message:
            return f"{base}: {self.message}"
        if self.raw_body:
            return f"{base}: {self.raw_body}"
        return base

    def __repr__(self) -> str:
        return (
            f"APIError(status_code={self.status_code!r}, code={self.code!r}, "
            f"message={self.message!r})"
        )
