"""Local translation provider: bundles shipped with the application.

Reads one JSON resource per namespace through a BundleSource, merges them
into a bundle and caches it per locale. If any namespace fails to load the
whole locale is treated as failed and the default locale's bundle is
served instead; a failed default locale yields the empty bundle.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from recipeer_locale.constants import DEFAULT_NAMESPACES
from recipeer_locale.errors import TranslationLoadError
from recipeer_locale.registry import DEFAULT_REGISTRY, LocaleRegistry
from recipeer_locale.translation.bundle import EMPTY_BUNDLE, freeze_bundle, parse_namespace_json
from recipeer_locale.translation.cache import BundleCache
from recipeer_locale.translation.sources import BundleSource, packaged_source
from recipeer_locale.translation.types import LocaleCode, Namespace, TranslationBundle

__all__ = ["LocalTranslationProvider"]

logger = logging.getLogger(__name__)


class LocalTranslationProvider:
    """Translation provider reading bundled JSON resources.

    Example:
        >>> provider = LocalTranslationProvider()
        >>> bundle = await provider.load_translations("nl-NL")
        >>> bundle["common"]["buttons.save"]
        'Opslaan'
        >>> provider.has_translations("nl-NL")
        True

    Attributes:
        namespaces: Namespaces loaded for every locale
    """

    __slots__ = ("_cache", "_registry", "_source", "namespaces")

    def __init__(
        self,
        source: BundleSource | None = None,
        *,
        registry: LocaleRegistry = DEFAULT_REGISTRY,
        namespaces: Iterable[Namespace] = DEFAULT_NAMESPACES,
    ) -> None:
        """Initialize local provider.

        Args:
            source: Where namespace JSON is read from (default: packaged files)
            registry: Registry naming the default (fallback) locale
            namespaces: Namespaces that make up a bundle

        Raises:
            ValueError: If namespaces is empty
        """
        self.namespaces: tuple[Namespace, ...] = tuple(dict.fromkeys(namespaces))
        if not self.namespaces:
            msg = "At least one namespace is required"
            raise ValueError(msg)
        self._source: BundleSource = source if source is not None else packaged_source()
        self._registry = registry
        self._cache = BundleCache()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocalTranslationProvider(namespaces={self.namespaces}, cache={self._cache!r})"

    @property
    def default_locale(self) -> LocaleCode:
        """Locale whose bundle serves as the fallback."""
        return self._registry.default_code

    async def load_translations(self, code: LocaleCode) -> TranslationBundle:
        """Load the bundle for code, falling back to the default locale."""
        return await self._cache.get_or_load(
            code,
            lambda: self._load_locale(code),
            lambda error: self._fallback(code, error),
        )

    def has_translations(self, code: LocaleCode) -> bool:
        """Check if a bundle for code is cached."""
        return code in self._cache

    def get_fallback_translations(self) -> TranslationBundle:
        """Return the cached default-locale bundle, or an empty bundle."""
        return self._cache.get(self.default_locale) or EMPTY_BUNDLE

    async def _fallback(self, code: LocaleCode, error: TranslationLoadError) -> TranslationBundle:
        logger.warning("Failed to load translations for %s: %s", code, error)
        if code == self.default_locale:
            return EMPTY_BUNDLE
        return await self.load_translations(self.default_locale)

    async def _load_locale(self, code: LocaleCode) -> TranslationBundle:
        sources = await asyncio.gather(
            *(self._read_namespace(code, namespace) for namespace in self.namespaces)
        )
        raw = {
            namespace: parse_namespace_json(text, locale=code, namespace=namespace)
            for namespace, text in zip(self.namespaces, sources, strict=True)
        }
        return freeze_bundle(raw, locale=code)

    async def _read_namespace(self, code: LocaleCode, namespace: Namespace) -> str:
        try:
            return await asyncio.to_thread(self._source.read, code, namespace)
        except FileNotFoundError as e:
            where = self._source.describe_path(code, namespace)
            msg = f"Could not load translations for locale {code}: {where} not found"
            raise TranslationLoadError(msg, locale=code) from e
        except (OSError, ValueError) as e:
            # Permission errors, path traversal errors, undecodable files
            msg = f"Could not load translations for locale {code}: {e}"
            raise TranslationLoadError(msg, locale=code) from e
