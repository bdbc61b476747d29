"""Hybrid translation provider and provider factory.

HybridTranslationProvider picks its delegate once, at construction:
the external provider when a remote endpoint is configured and the
deployment is production-like, the local provider otherwise. It holds no
state beyond that choice.

Python 3.13+.
"""

from __future__ import annotations

import logging

import httpx

from recipeer_locale.config import ProviderConfig
from recipeer_locale.registry import DEFAULT_REGISTRY, LocaleRegistry
from recipeer_locale.translation.external import ExternalTranslationProvider
from recipeer_locale.translation.local import LocalTranslationProvider
from recipeer_locale.translation.provider import TranslationProvider
from recipeer_locale.translation.sources import BundleSource
from recipeer_locale.translation.types import LocaleCode, TranslationBundle

__all__ = ["HybridTranslationProvider", "create_translation_provider"]

logger = logging.getLogger(__name__)


class HybridTranslationProvider:
    """Selects the external provider in production, the local one elsewhere.

    Example:
        >>> config = ProviderConfig(service_url="https://i18n.example.com", deployment="production")
        >>> HybridTranslationProvider(config).delegate
        ExternalTranslationProvider(base_url='https://i18n.example.com', auth=none)
        >>> type(HybridTranslationProvider(ProviderConfig()).delegate).__name__
        'LocalTranslationProvider'
    """

    __slots__ = ("_delegate",)

    def __init__(
        self,
        config: ProviderConfig,
        *,
        registry: LocaleRegistry = DEFAULT_REGISTRY,
        source: BundleSource | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize hybrid provider and choose the delegate.

        Args:
            config: Provider configuration
            registry: Registry naming the default locale
            source: Bundle source for the local provider
            transport: httpx transport override for the external provider
        """
        local = LocalTranslationProvider(source, registry=registry)
        if config.use_external and config.service_url is not None:
            logger.debug("Using external translations from %s", config.service_url)
            self._delegate: TranslationProvider = ExternalTranslationProvider(
                config.service_url,
                config.api_key,
                registry=registry,
                fallback=local,
                timeout=config.timeout,
                transport=transport,
            )
        else:
            self._delegate = local

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"HybridTranslationProvider(delegate={self._delegate!r})"

    @property
    def delegate(self) -> TranslationProvider:
        """The provider every call is forwarded to."""
        return self._delegate

    async def load_translations(self, code: LocaleCode) -> TranslationBundle:
        """Load the bundle for code through the delegate."""
        return await self._delegate.load_translations(code)

    def has_translations(self, code: LocaleCode) -> bool:
        """Check the delegate's cache for code."""
        return self._delegate.has_translations(code)

    def get_fallback_translations(self) -> TranslationBundle:
        """Return the delegate's fallback bundle."""
        return self._delegate.get_fallback_translations()


def create_translation_provider(
    config: ProviderConfig | None = None,
    *,
    registry: LocaleRegistry = DEFAULT_REGISTRY,
    source: BundleSource | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TranslationProvider:
    """Create the provider appropriate for the configuration.

    A hybrid provider when a remote endpoint is configured, otherwise a
    local provider.

    Args:
        config: Provider configuration (default: ProviderConfig.from_env())
        registry: Registry naming the default locale
        source: Bundle source for local loading
        transport: httpx transport override for remote loading
    """
    if config is None:
        config = ProviderConfig.from_env()
    if config.service_url:
        return HybridTranslationProvider(
            config, registry=registry, source=source, transport=transport
        )
    return LocalTranslationProvider(source, registry=registry)
