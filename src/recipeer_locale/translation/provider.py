"""Translation provider protocol.

Every provider loads whole bundles per locale, caches them by locale code
and resolves failures through a fallback chain instead of raising: a
caller of load_translations() always receives some bundle, at worst the
empty one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from recipeer_locale.translation.types import LocaleCode, TranslationBundle

__all__ = ["TranslationProvider"]


@runtime_checkable
class TranslationProvider(Protocol):
    """Protocol for loading translation bundles.

    This is a Protocol (structural typing) rather than ABC: Local, External
    and Hybrid providers compose one another instead of inheriting.
    """

    async def load_translations(self, code: LocaleCode) -> TranslationBundle:
        """Load the bundle for code.

        Never raises for load failures; resolves to the default locale's
        bundle or an empty bundle instead.
        """
        ...

    def has_translations(self, code: LocaleCode) -> bool:
        """Check the cache (only) for a bundle for code."""
        ...

    def get_fallback_translations(self) -> TranslationBundle:
        """Return the cached default-locale bundle, or an empty bundle."""
        ...
