"""Locale-indexed bundle cache with single-flight loading.

Both translation providers keep their bundles in a BundleCache. The cache
holds two maps keyed by locale code:

- completed bundles, populated only by successful loads
- in-flight asyncio tasks, so concurrent requests for a locale that is
  already loading attach to the running task instead of starting another

Callers await the shared task through asyncio.shield(): cancelling one
waiting caller never cancels the load the others are waiting on. A load
that finishes after nobody cares about its locale any more still fills
that locale's cache entry.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable

from recipeer_locale.errors import TranslationLoadError
from recipeer_locale.translation.types import LocaleCode, TranslationBundle

__all__ = ["BundleCache"]

logger = logging.getLogger(__name__)

type BundleLoader = Callable[[], Awaitable[TranslationBundle]]
type FailureHandler = Callable[[TranslationLoadError], Awaitable[TranslationBundle]]


class BundleCache:
    """Per-locale bundle cache plus single-flight map of running loads.

    Example:
        >>> cache = BundleCache()
        >>> bundle = await cache.get_or_load("nl-NL", load, on_failure)
        >>> "nl-NL" in cache
        True
    """

    __slots__ = ("_bundles", "_in_flight")

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._bundles: dict[LocaleCode, TranslationBundle] = {}
        self._in_flight: dict[LocaleCode, asyncio.Task[TranslationBundle]] = {}

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"BundleCache(cached={sorted(self._bundles)}, loading={sorted(self._in_flight)})"

    def __contains__(self, code: object) -> bool:
        return code in self._bundles

    def get(self, code: LocaleCode) -> TranslationBundle | None:
        """Return the cached bundle for code, if any."""
        return self._bundles.get(code)

    def is_loading(self, code: LocaleCode) -> bool:
        """Check if a load for code is currently in flight."""
        return code in self._in_flight

    @property
    def cached_locales(self) -> tuple[LocaleCode, ...]:
        """Locale codes with a cached bundle, in insertion order."""
        return tuple(self._bundles)

    def clear(self) -> None:
        """Drop all cached bundles. Running loads are left to finish."""
        self._bundles.clear()

    async def get_or_load(
        self,
        code: LocaleCode,
        load: BundleLoader,
        on_failure: FailureHandler,
    ) -> TranslationBundle:
        """Return the bundle for code, loading it at most once at a time.

        Args:
            code: Locale code the bundle belongs to
            load: Coroutine factory performing the underlying load. Raises
                TranslationLoadError on failure.
            on_failure: Coroutine resolving a substitute bundle after a
                failed load. Its result is shared with every waiting caller
                but is not cached under code.

        Returns:
            The loaded bundle, or whatever on_failure resolved
        """
        cached = self._bundles.get(code)
        if cached is not None:
            return cached

        task = self._in_flight.get(code)
        if task is None:
            task = asyncio.ensure_future(self._run(code, load, on_failure))
            self._in_flight[code] = task
            task.add_done_callback(functools.partial(self._finish, code))
        else:
            logger.debug("Joining in-flight translation load for %s", code)
        return await asyncio.shield(task)

    async def _run(
        self,
        code: LocaleCode,
        load: BundleLoader,
        on_failure: FailureHandler,
    ) -> TranslationBundle:
        try:
            bundle = await load()
        except TranslationLoadError as e:
            return await on_failure(e)
        self._bundles[code] = bundle
        return bundle

    def _finish(self, code: LocaleCode, task: asyncio.Task[TranslationBundle]) -> None:
        if self._in_flight.get(code) is task:
            del self._in_flight[code]
