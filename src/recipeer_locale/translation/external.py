"""External translation provider: bundles fetched from a remote endpoint.

Fetches ``GET {base_url}/translations/{code}`` with httpx, optionally
authenticated with a bearer token. The response body must be a JSON
object of namespace -> (nested) key objects. Any failure (network error,
non-success status, malformed payload) hands the request to an internal
local provider, so the application keeps working from bundled resources.

Python 3.13+. Uses httpx for HTTP.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from recipeer_locale.constants import DEFAULT_HTTP_TIMEOUT, TRANSLATIONS_PATH
from recipeer_locale.errors import TranslationLoadError
from recipeer_locale.registry import DEFAULT_REGISTRY, LocaleRegistry
from recipeer_locale.translation.bundle import EMPTY_BUNDLE, freeze_bundle
from recipeer_locale.translation.cache import BundleCache
from recipeer_locale.translation.local import LocalTranslationProvider
from recipeer_locale.translation.provider import TranslationProvider
from recipeer_locale.translation.types import LocaleCode, TranslationBundle

__all__ = ["ExternalTranslationProvider"]

logger = logging.getLogger(__name__)


class ExternalTranslationProvider:
    """Translation provider backed by a remote translation service.

    Example:
        >>> provider = ExternalTranslationProvider("https://i18n.example.com/", "s3cret")
        >>> provider.base_url
        'https://i18n.example.com'
        >>> bundle = await provider.load_translations("nl-NL")
        # GET https://i18n.example.com/translations/nl-NL
        # Authorization: Bearer s3cret
    """

    __slots__ = ("_api_key", "_base_url", "_cache", "_fallback", "_registry", "_timeout",
                 "_transport")

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        *,
        registry: LocaleRegistry = DEFAULT_REGISTRY,
        fallback: TranslationProvider | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize external provider.

        Args:
            base_url: Service base URL; a trailing slash is removed
            api_key: Optional bearer credential
            registry: Registry naming the default locale
            fallback: Provider used when the remote load fails
                (default: a LocalTranslationProvider over packaged files)
            timeout: Request timeout in seconds
            transport: httpx transport override (e.g. httpx.MockTransport)

        Raises:
            ValueError: If base_url is empty
        """
        if not base_url.strip():
            msg = "base_url must not be empty"
            raise ValueError(msg)
        self._base_url = base_url.strip().rstrip("/")
        self._api_key = api_key
        self._registry = registry
        self._fallback: TranslationProvider = (
            fallback if fallback is not None else LocalTranslationProvider(registry=registry)
        )
        self._timeout = timeout
        self._transport = transport
        self._cache = BundleCache()

    def __repr__(self) -> str:
        """Return string representation for debugging (credential redacted)."""
        auth = "bearer" if self._api_key else "none"
        return f"ExternalTranslationProvider(base_url={self._base_url!r}, auth={auth})"

    @property
    def base_url(self) -> str:
        """Service base URL without trailing slash."""
        return self._base_url

    @property
    def fallback(self) -> TranslationProvider:
        """Provider used when the remote load fails."""
        return self._fallback

    def url_for(self, code: LocaleCode) -> str:
        """Return the endpoint URL serving code's bundle."""
        return self._base_url + TRANSLATIONS_PATH.format(locale=quote(code, safe=""))

    async def load_translations(self, code: LocaleCode) -> TranslationBundle:
        """Fetch the bundle for code, falling back to local resources."""
        return await self._cache.get_or_load(
            code,
            lambda: self._fetch(code),
            lambda error: self._fall_back(code, error),
        )

    def has_translations(self, code: LocaleCode) -> bool:
        """Check if a remotely fetched bundle for code is cached."""
        return code in self._cache

    def get_fallback_translations(self) -> TranslationBundle:
        """Return the cached default-locale bundle, or an empty bundle."""
        return self._cache.get(self._registry.default_code) or EMPTY_BUNDLE

    async def _fall_back(self, code: LocaleCode, error: TranslationLoadError) -> TranslationBundle:
        logger.warning("Failed to load external translations for %s: %s", code, error)
        return await self._fallback.load_translations(code)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _fetch(self, code: LocaleCode) -> TranslationBundle:
        url = self.url_for(code)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, headers=self._headers())
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            msg = f"Failed to fetch translations: {status} {e.response.reason_phrase}"
            raise TranslationLoadError(msg, locale=code) from e
        except httpx.HTTPError as e:
            msg = f"Request to {url} failed: {e!r}"
            raise TranslationLoadError(msg, locale=code) from e
        except ValueError as e:
            # json.JSONDecodeError and UnicodeDecodeError
            msg = f"Malformed translation payload from {url}: {e}"
            raise TranslationLoadError(msg, locale=code) from e
        return freeze_bundle(payload, locale=code)
