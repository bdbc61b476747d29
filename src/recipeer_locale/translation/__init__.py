"""Translation loading package.

Provides the translation stack: type aliases, bundle validation, bundle
sources, the provider protocol with its Local/External/Hybrid
implementations, and the Translator engine.

Submodules:
    types      - PEP 695 type aliases (LocaleCode, Namespace, TranslationBundle)
    bundle     - Validation, flattening and freezing of raw bundles
    sources    - BundleSource protocol, PathBundleSource, MappingBundleSource
    cache      - BundleCache (locale-indexed cache with single-flight loads)
    provider   - TranslationProvider protocol
    local      - LocalTranslationProvider
    external   - ExternalTranslationProvider (httpx)
    hybrid     - HybridTranslationProvider, create_translation_provider
    translator - Translator (active language, lookup, languageChanged events)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from recipeer_locale.translation.bundle import EMPTY_BUNDLE, freeze_bundle
from recipeer_locale.translation.cache import BundleCache
from recipeer_locale.translation.external import ExternalTranslationProvider
from recipeer_locale.translation.hybrid import (
    HybridTranslationProvider,
    create_translation_provider,
)
from recipeer_locale.translation.local import LocalTranslationProvider
from recipeer_locale.translation.provider import TranslationProvider
from recipeer_locale.translation.sources import (
    BundleSource,
    MappingBundleSource,
    PathBundleSource,
    packaged_source,
)
from recipeer_locale.translation.translator import Translator, interpolate
from recipeer_locale.translation.types import (
    LocaleCode,
    Namespace,
    NamespaceBundle,
    TranslationBundle,
    TranslationKey,
)

__all__ = [
    # Provider protocol and implementations
    "TranslationProvider",
    "LocalTranslationProvider",
    "ExternalTranslationProvider",
    "HybridTranslationProvider",
    "create_translation_provider",
    # Rendering engine
    "Translator",
    "interpolate",
    # Bundle sources
    "BundleSource",
    "PathBundleSource",
    "MappingBundleSource",
    "packaged_source",
    # Bundles and caching
    "BundleCache",
    "EMPTY_BUNDLE",
    "freeze_bundle",
    # Type aliases for user code type annotations
    "LocaleCode",
    "Namespace",
    "NamespaceBundle",
    "TranslationBundle",
    "TranslationKey",
]
