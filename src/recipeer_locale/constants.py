"""Shared constants for recipeer-locale.

Centralizes configuration values used across the registry, controller and
translation packages. Placing them here avoids circular imports and gives a
single source of truth.

Constants are grouped by domain:
- Locale defaults: Default locale and persisted preference key
- Translation loading: Namespaces, remote endpoint layout, timeouts
- Environment variables: Names read by ProviderConfig.from_env()

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "STORAGE_KEY",
    "MAX_BABEL_LOCALE_CACHE_SIZE",
    # Translation loading
    "DEFAULT_NAMESPACES",
    "DEFAULT_NAMESPACE",
    "KEY_SEPARATOR",
    "TRANSLATIONS_PATH",
    "DEFAULT_HTTP_TIMEOUT",
    # Environment variables
    "ENV_SERVICE_URL",
    "ENV_API_KEY",
    "ENV_DEPLOYMENT",
    "ENV_TIMEOUT",
    "PRODUCTION_DEPLOYMENTS",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale every unknown code resolves to.
DEFAULT_LOCALE: str = "en-US"

# Key of the persisted locale preference in the client-side store.
STORAGE_KEY: str = "recipeer-locale"

# Maximum cached Babel Locale objects (see locale_utils.get_babel_locale).
MAX_BABEL_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# TRANSLATION LOADING
# ============================================================================

# Namespaces shipped with the application, one JSON file each per locale.
DEFAULT_NAMESPACES: tuple[str, ...] = ("common", "nutrition")

# Namespace used by Translator.translate() when none is given.
DEFAULT_NAMESPACE: str = "common"

# Separator used when flattening nested translation keys.
KEY_SEPARATOR: str = "."

# Remote endpoint layout, relative to the configured base URL.
TRANSLATIONS_PATH: str = "/translations/{locale}"

# Seconds before a remote translation request is abandoned.
DEFAULT_HTTP_TIMEOUT: float = 10.0

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_SERVICE_URL: str = "RECIPEER_TRANSLATION_SERVICE_URL"
ENV_API_KEY: str = "RECIPEER_TRANSLATION_API_KEY"
ENV_DEPLOYMENT: str = "RECIPEER_ENV"
ENV_TIMEOUT: str = "RECIPEER_TRANSLATION_TIMEOUT"

# RECIPEER_ENV values treated as production-like deployments.
PRODUCTION_DEPLOYMENTS: frozenset[str] = frozenset({"production", "prod"})
