"""Bundle sources and translation data shared by the test suite."""

from __future__ import annotations

import threading
from collections.abc import Mapping

from recipeer_locale.translation.sources import MappingBundleSource

__all__ = ["EN_US_RESOURCES", "NL_NL_RESOURCES", "CountingSource", "FailingSource"]

EN_US_RESOURCES: Mapping[str, object] = {
    "common": {
        "buttons": {"save": "Save", "cancel": "Cancel"},
        "recipe": {"servings": "Serves {{count}}"},
        "onlyEnglish": "Only in English",
    },
    "nutrition": {"calories": "Calories"},
}

NL_NL_RESOURCES: Mapping[str, object] = {
    "common": {
        "buttons": {"save": "Opslaan", "cancel": "Annuleren"},
        "recipe": {"servings": "Voor {{count}} personen"},
    },
    "nutrition": {"calories": "Calorieën"},
}


class CountingSource:
    """MappingBundleSource wrapper counting reads per locale."""

    def __init__(self, resources: Mapping[str, Mapping[str, object]]) -> None:
        self._inner = MappingBundleSource(resources)
        self._lock = threading.Lock()
        self.reads: dict[str, int] = {}

    def read(self, locale: str, namespace: str) -> str:
        # Reads run in worker threads (asyncio.to_thread)
        with self._lock:
            self.reads[locale] = self.reads.get(locale, 0) + 1
        return self._inner.read(locale, namespace)

    def describe_path(self, locale: str, namespace: str) -> str:
        return self._inner.describe_path(locale, namespace)


class FailingSource:
    """Source whose every read raises the given exception."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def read(self, locale: str, namespace: str) -> str:
        self.calls += 1
        raise self.error

    def describe_path(self, locale: str, namespace: str) -> str:
        return f"failing://{locale}/{namespace}.json"
