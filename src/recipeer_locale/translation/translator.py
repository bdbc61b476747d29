"""Translator: the translation-rendering engine.

Keeps the active language, the bundles loaded so far, and a list of
languageChanged listeners. LocaleController drives it through
change_language() and listens to it for language changes made directly
on the engine.

Changing language never waits for bundles: when an event loop is running
the new language's bundle is loaded in a background task, and until it
arrives lookups fall back to the default locale's strings, then to the
key itself.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable, Mapping

from recipeer_locale.constants import DEFAULT_NAMESPACE
from recipeer_locale.registry import DEFAULT_REGISTRY, LocaleRegistry
from recipeer_locale.translation.provider import TranslationProvider
from recipeer_locale.translation.types import LocaleCode, TranslationBundle

__all__ = ["LanguageListener", "Translator", "interpolate"]

logger = logging.getLogger(__name__)

type LanguageListener = Callable[[LocaleCode], None]

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def interpolate(template: str, params: Mapping[str, object]) -> str:
    """Replace ``{{name}}`` placeholders with params; unknown names are kept.

    Example:
        >>> interpolate("Serves {{count}}", {"count": 4})
        'Serves 4'
    """
    if not params:
        return template

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return _PLACEHOLDER.sub(replace, template)


class Translator:
    """Active-language translation lookup over a TranslationProvider.

    Example:
        >>> translator = Translator(LocalTranslationProvider())
        >>> await translator.load("en-US")
        >>> translator.translate("buttons.save")
        'Save'
        >>> translator.translate("recipe.servings", count=4)
        'Serves 4'
    """

    __slots__ = ("_bundles", "_language", "_listeners", "_pending", "_provider", "_registry")

    def __init__(
        self,
        provider: TranslationProvider,
        *,
        registry: LocaleRegistry = DEFAULT_REGISTRY,
        language: LocaleCode | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            provider: Source of translation bundles
            registry: Registry naming the default locale
            language: Initial active language (default: registry default)
        """
        self._provider = provider
        self._registry = registry
        self._language: LocaleCode = language or registry.default_code
        self._bundles: dict[LocaleCode, TranslationBundle] = {}
        self._listeners: list[LanguageListener] = []
        self._pending: set[asyncio.Task[TranslationBundle]] = set()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Translator(language={self._language!r}, loaded={sorted(self._bundles)})"

    @property
    def language(self) -> LocaleCode:
        """The active language."""
        return self._language

    @property
    def provider(self) -> TranslationProvider:
        """The provider bundles are loaded from."""
        return self._provider

    def on_language_changed(self, listener: LanguageListener) -> None:
        """Register a listener called with the new code after each change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def off_language_changed(self, listener: LanguageListener) -> None:
        """Remove a listener registered with on_language_changed()."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def change_language(self, code: LocaleCode) -> None:
        """Switch the active language and notify listeners.

        No-op when code is already active. Schedules a background load of
        the bundle when called inside a running event loop.
        """
        if code == self._language:
            return
        self._language = code
        self._schedule_load(code)
        for listener in tuple(self._listeners):
            if listener in self._listeners:
                listener(code)

    def _schedule_load(self, code: LocaleCode) -> None:
        if code in self._bundles:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop: bundles are loaded on demand via load()
            return
        task = loop.create_task(self.load(code))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def load(self, code: LocaleCode | None = None) -> TranslationBundle:
        """Load and keep the bundle for code (default: the active language)."""
        target = code or self._language
        bundle = await self._provider.load_translations(target)
        self._bundles[target] = bundle
        return bundle

    async def wait_until_loaded(self) -> None:
        """Wait for every background bundle load scheduled so far."""
        if self._pending:
            await asyncio.gather(*tuple(self._pending))

    def is_loaded(self, code: LocaleCode | None = None) -> bool:
        """Check if a bundle for code (default: active language) is held."""
        return (code or self._language) in self._bundles

    def translate(
        self,
        key: str,
        namespace: str = DEFAULT_NAMESPACE,
        /,
        **params: object,
    ) -> str:
        """Return the localized string for key.

        Lookup order: active language bundle, default locale bundle, the
        provider's fallback bundle. Returns key when nothing matches.
        Keys may be written "namespace:key" to pick a namespace inline.
        """
        if ":" in key:
            namespace, key = key.split(":", 1)

        chain = (
            self._bundles.get(self._language),
            self._bundles.get(self._registry.default_code),
            self._provider.get_fallback_translations(),
        )
        for bundle in chain:
            if not bundle:
                continue
            value = bundle.get(namespace, {}).get(key)
            if value is not None:
                return interpolate(value, params)

        logger.debug("Missing translation %s:%s for %s", namespace, key, self._language)
        return key

    t = translate
