"""Translation provider configuration.

Provides a single frozen dataclass describing where translations come
from. Values are normally read once at startup from environment variables
via ProviderConfig.from_env().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlsplit

from recipeer_locale.constants import (
    DEFAULT_HTTP_TIMEOUT,
    ENV_API_KEY,
    ENV_DEPLOYMENT,
    ENV_SERVICE_URL,
    ENV_TIMEOUT,
    PRODUCTION_DEPLOYMENTS,
)

__all__ = ["ProviderConfig"]


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Immutable configuration for translation providers.

    All fields have defaults; ``ProviderConfig()`` describes a development
    deployment that only uses the bundled translations.

    Attributes:
        service_url: Base URL of the remote translation endpoint, or None
        api_key: Bearer credential sent to the remote endpoint, or None
        deployment: Deployment name (e.g. "development", "production")
        timeout: Seconds before a remote request is abandoned

    Example:
        >>> config = ProviderConfig(service_url="https://i18n.example.com", deployment="production")
        >>> config.use_external
        True
        >>> ProviderConfig(service_url="https://i18n.example.com").use_external
        False
    """

    service_url: str | None = None
    api_key: str | None = None
    deployment: str = "development"
    timeout: float = DEFAULT_HTTP_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If timeout is not positive or service_url is not an
                absolute http(s) URL
        """
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if self.service_url is not None:
            parts = urlsplit(self.service_url)
            if parts.scheme not in ("http", "https") or not parts.netloc:
                msg = f"service_url must be an absolute http(s) URL, got: '{self.service_url}'"
                raise ValueError(msg)

    @property
    def is_production(self) -> bool:
        """Check if the deployment is production-like."""
        return self.deployment.strip().lower() in PRODUCTION_DEPLOYMENTS

    @property
    def use_external(self) -> bool:
        """Check if translations should come from the remote endpoint."""
        return self.service_url is not None and self.is_production

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ProviderConfig:
        """Build configuration from environment variables.

        Reads RECIPEER_TRANSLATION_SERVICE_URL, RECIPEER_TRANSLATION_API_KEY,
        RECIPEER_ENV and RECIPEER_TRANSLATION_TIMEOUT. Empty values count as
        unset.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Raises:
            ValueError: If a value is present but invalid
        """
        env = os.environ if environ is None else environ
        timeout_raw = env.get(ENV_TIMEOUT, "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
        except ValueError:
            msg = f"{ENV_TIMEOUT} must be a number of seconds, got: '{timeout_raw}'"
            raise ValueError(msg) from None
        return cls(
            service_url=env.get(ENV_SERVICE_URL, "").strip() or None,
            api_key=env.get(ENV_API_KEY, "").strip() or None,
            deployment=env.get(ENV_DEPLOYMENT, "").strip() or "development",
            timeout=timeout,
        )
