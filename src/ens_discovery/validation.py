"""Input validation for ENS names and registry requests."""

import re
from typing import Optional
from urllib.parse import urlsplit

from ens_discovery.errors import InvalidInputError
from ens_discovery.models import ServiceRegistrationRequest

# Labels of [a-z0-9-] joined by dots, ending in ".eth", 3-255 chars overall
ENS_NAME_PATTERN = re.compile(r"(?=.{3,255}\Z)(?:[a-z0-9-]+\.)+eth")


def normalize_ens_name(ens_name: str) -> str:
    """Trim surrounding whitespace and lower-case an ENS name."""
    return ens_name.strip().lower()


def validate_ens_name(ens_name: str) -> bool:
    """Check whether an ENS name (after normalization) is well-formed.

    Example:
        >>> validate_ens_name(" Weather-API.ETH ")
        True
        >>> validate_ens_name("invalid-name")
        False
    """
    return ENS_NAME_PATTERN.fullmatch(normalize_ens_name(ens_name)) is not None


def require_ens_name(ens_name: str) -> str:
    """Normalize an ENS name, raising if it is empty or malformed.

    Returns:
        The normalized ENS name

    Raises:
        InvalidInputError: If the name is empty or does not match the pattern
    """
    normalized = normalize_ens_name(ens_name)
    if not normalized:
        raise InvalidInputError("ens name is required", field="ensName")
    if ENS_NAME_PATTERN.fullmatch(normalized) is None:
        raise InvalidInputError(f"invalid ens name: {ens_name!r}", field="ensName")
    return normalized


def validate_registration_request(request: ServiceRegistrationRequest) -> None:
    """Validate a registration request before it is sent.

    Checks run in a fixed order and the first failure is raised:
    ENS name, owner, endpoint, payment scheme, network.

    Raises:
        InvalidInputError: Naming the first missing or invalid field
    """
    require_ens_name(request.ens_name)

    required = (
        ("owner", request.owner, "owner is required"),
        ("endpoint", request.endpoint, "endpoint is required"),
        ("paymentScheme", request.payment_scheme, "payment scheme is required"),
        ("network", request.network, "network is required"),
    )
    for field, value, message in required:
        if not value.strip():
            raise InvalidInputError(message, field=field)


def require_absolute_url(value: str, field: str) -> str:
    """Trim a URL and check it has both a scheme and a host."""
    normalized = value.strip()
    if not is_absolute_url(normalized):
        raise InvalidInputError(f"{field} must be a valid URL", field=field)
    return normalized


def require_non_negative_int(value: Optional[int], field: str) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInputError(
            f"{field} must be a non-negative integer", field=field
        )
    return value


def is_absolute_url(value: str) -> bool:
    """Check that a URL has a scheme and a host, and a numeric port if any."""
    try:
        parsed = urlsplit(value)
        # .port raises ValueError for non-numeric or out-of-range ports
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.hostname)
