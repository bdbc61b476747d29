"""recipeer-locale - Locale and internationalization core for Recipeer.

Resolves the user's active locale, persists and propagates locale changes,
converts recipe measurement units, formats currency/number/date values with
Babel, and loads translation bundles through cached, fallback-aware
providers.

Public API:
    LocaleController - Current-locale state, detection, persistence, subscribers
    LocaleFormatter - Currency/number/date formatting for the current locale
    LocaleRegistry, LocaleConfig - Supported locale table
    UnitConverter - Unit conversion namespace (temperature, weight, volume, length)
    Translator - Active-language translation lookup
    create_translation_provider - Local/External/Hybrid provider factory
    build_locale_context - UI-facing context value

Exceptions:
    LocaleCoreError - Base exception class
    UnknownLocaleError - Locale code outside the supported set
    InvalidMeasurementError - Non-finite input to a unit conversion

Submodules:
    recipeer_locale.registry - Locale configurations and detection
    recipeer_locale.units - Conversion modules, one per quantity kind
    recipeer_locale.translation - Providers, bundle sources, Translator
    recipeer_locale.storage - Persisted preference stores
    recipeer_locale.environment - Environment collaborator
"""

from .config import ProviderConfig
from .context import LocaleContextValue, build_locale_context
from .controller import LocaleController, Subscription
from .enums import ControllerState, Currency, MeasurementSystem, NumberStyle, TextDirection
from .environment import Environment, HeadlessEnvironment
from .errors import (
    FormattingError,
    InvalidMeasurementError,
    LocaleControllerError,
    LocaleCoreError,
    RegistryError,
    StorageUnavailableError,
    UnknownLocaleError,
)
from .formatting import LocaleFormatter
from .registry import (
    DEFAULT_REGISTRY,
    LocaleConfig,
    LocaleRegistry,
    NumberFormatOptions,
    detect_from_environment_tags,
    get_config,
    list_available,
)
from .storage import InMemoryPreferenceStore, JsonFilePreferenceStore, PreferenceStore
from .translation import (
    ExternalTranslationProvider,
    HybridTranslationProvider,
    LocalTranslationProvider,
    TranslationProvider,
    Translator,
    create_translation_provider,
)
from .units import CONVERSIONS, UnitConverter

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("recipeer-locale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CONVERSIONS",
    "DEFAULT_REGISTRY",
    "ControllerState",
    "Currency",
    "Environment",
    "ExternalTranslationProvider",
    "FormattingError",
    "HeadlessEnvironment",
    "HybridTranslationProvider",
    "InMemoryPreferenceStore",
    "InvalidMeasurementError",
    "JsonFilePreferenceStore",
    "LocalTranslationProvider",
    "LocaleConfig",
    "LocaleContextValue",
    "LocaleController",
    "LocaleControllerError",
    "LocaleCoreError",
    "LocaleFormatter",
    "LocaleRegistry",
    "MeasurementSystem",
    "NumberFormatOptions",
    "NumberStyle",
    "PreferenceStore",
    "ProviderConfig",
    "RegistryError",
    "StorageUnavailableError",
    "Subscription",
    "TextDirection",
    "TranslationProvider",
    "Translator",
    "UnitConverter",
    "UnknownLocaleError",
    "__version__",
    "build_locale_context",
    "create_translation_provider",
    "detect_from_environment_tags",
    "get_config",
    "list_available",
]
