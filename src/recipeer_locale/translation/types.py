"""Type aliases for the translation domain.

Provides semantic type aliases used throughout the translation package
and by user code when annotating provider call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleCode",
    "Namespace",
    "NamespaceBundle",
    "TranslationBundle",
    "TranslationKey",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en-US', 'nl-NL')."""

type Namespace = str
"""Translation namespace, one JSON resource per locale (e.g., 'common')."""

type TranslationKey = str
"""Flattened translation key (e.g., 'buttons.save')."""

type NamespaceBundle = Mapping[TranslationKey, str]
"""Key -> localized string for one namespace."""

type TranslationBundle = Mapping[Namespace, NamespaceBundle]
"""Namespace -> (key -> localized string) for one locale."""
