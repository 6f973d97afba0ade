"""Client configuration.

Configuration can be passed explicitly or loaded from the environment:

Environment Variables:
    DISCOVERY_API_BASE_URL: Registry API base URL (e.g. https://registry.example.com)
    DISCOVERY_API_TIMEOUT: Request timeout in seconds for the default HTTP client (default: 30)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientConfig:
    """Settings for a RegistryClient."""

    api_base_url: str
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        api_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """Build a config from environment variables.

        Args:
            api_base_url: Base URL (overrides DISCOVERY_API_BASE_URL env var)
            timeout: Timeout in seconds (overrides DISCOVERY_API_TIMEOUT env var)

        Returns:
            ClientConfig; the base URL is validated when the client is built
        """
        base_url = api_base_url or os.getenv("DISCOVERY_API_BASE_URL", "")

        if timeout is None:
            timeout = DEFAULT_TIMEOUT
            env_timeout = os.getenv("DISCOVERY_API_TIMEOUT")
            if env_timeout:
                try:
                    timeout = float(env_timeout)
                except ValueError:
                    logger.warning(
                        f"Invalid DISCOVERY_API_TIMEOUT '{env_timeout}', "
                        f"defaulting to {DEFAULT_TIMEOUT}"
                    )

        return cls(api_base_url=base_url, timeout=timeout)
