"""Locale utilities for BCP-47 tags and Babel lookups.

Centralizes locale tag handling used throughout the codebase:
- BCP-47 <-> POSIX conversion for Babel API compatibility
- Primary-language extraction for prefix matching
- Cached Babel Locale construction
- Language-preference detection from the operating system

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from recipeer_locale.constants import MAX_BABEL_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_languages",
    "normalize_locale",
    "primary_language",
    "to_bcp47",
]

_PSEUDO_LOCALES = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("nl-NL")
        'nl_NL'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert a POSIX locale string to a BCP-47 tag.

    Strips encoding (".UTF-8") and modifier ("@euro") suffixes.

    Example:
        >>> to_bcp47("nl_NL.UTF-8")
        'nl-NL'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("_", "-")


def primary_language(tag: str) -> str:
    """Return the lowercased primary language subtag of a locale tag.

    Example:
        >>> primary_language("nl-BE")
        'nl'
        >>> primary_language("EN_us")
        'en'
    """
    return normalize_locale(tag).split("_", 1)[0].strip().lower()


@functools.lru_cache(maxsize=MAX_BABEL_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, so formatting calls
    that run on every render do not re-parse CLDR identifiers.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_languages() -> tuple[str, ...]:
    """Detect the user's ordered language preferences from the OS.

    Detection order:
    1. LANGUAGE environment variable (colon-separated priority list)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)
    5. Python locale.getlocale() (OS-level locale)

    Filters out "C" and "POSIX" pseudo-locales and removes duplicates while
    keeping the first occurrence.

    Returns:
        BCP-47 tags in preference order; empty if nothing is configured.

    Example:
        >>> import os
        >>> os.environ["LANG"] = "nl_NL.UTF-8"
        >>> get_system_languages()
        ('nl-NL',)
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    language = os.environ.get("LANGUAGE", "")
    candidates.extend(part for part in language.split(":") if part)

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            candidates.append(value)

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        candidates.append(system_locale)

    tags = (to_bcp47(c) for c in candidates if c not in _PSEUDO_LOCALES)
    return tuple(dict.fromkeys(tag for tag in tags if tag not in _PSEUDO_LOCALES))
