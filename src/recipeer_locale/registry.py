"""Locale registry: the static table of supported locale configurations.

The registry is pure lookup with no dependencies on the rest of the
package. Unknown codes never raise here; they resolve to the default
locale's configuration. Strict validation lives in LocaleController.

Components:
    NumberFormatOptions - Fraction-digit and style options for numbers
    LocaleConfig - Immutable per-locale configuration
    LocaleRegistry - Ordered, validated collection of LocaleConfig
    DEFAULT_REGISTRY - The application's built-in registry (en-US, nl-NL)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from recipeer_locale.constants import DEFAULT_LOCALE
from recipeer_locale.enums import Currency, MeasurementSystem, NumberStyle, TextDirection
from recipeer_locale.errors import RegistryError
from recipeer_locale.locale_utils import primary_language

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data model
    "NumberFormatOptions",
    "LocaleConfig",
    "LocaleRegistry",
    # Built-in registry
    "BUILTIN_LOCALES",
    "BUILTIN_PREFIX_MAP",
    "DEFAULT_REGISTRY",
    # Convenience functions bound to DEFAULT_REGISTRY
    "get_config",
    "list_available",
    "detect_from_environment_tags",
]


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """Structured number formatting options for a locale.

    Mirrors the subset of Intl.NumberFormat options the application uses.

    Attributes:
        style: Decimal or percent rendering
        minimum_fraction_digits: Fraction digits always shown
        maximum_fraction_digits: Fraction digits shown at most
    """

    style: NumberStyle = NumberStyle.DECIMAL
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 2

    def __post_init__(self) -> None:
        """Validate fraction digit bounds.

        Raises:
            ValueError: If a bound is negative or minimum exceeds maximum
        """
        if self.minimum_fraction_digits < 0 or self.maximum_fraction_digits < 0:
            msg = "fraction digits must not be negative"
            raise ValueError(msg)
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            msg = (
                f"minimum_fraction_digits ({self.minimum_fraction_digits}) exceeds "
                f"maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Immutable configuration of one supported locale.

    Attributes:
        code: BCP-47 locale identifier (e.g. "en-US")
        display_name: Name shown in locale pickers
        flag_glyph: Flag emoji shown next to the name
        measurement_system: Preferred system for recipe quantities
        default_currency: Currency used when none is given explicitly
        text_direction: Direction applied to the hosting document
        date_format_pattern: LDML date pattern (e.g. "MM/dd/yyyy")
        number_format_options: Options for plain and currency numbers
    """

    code: str
    display_name: str
    flag_glyph: str
    measurement_system: MeasurementSystem
    default_currency: Currency
    text_direction: TextDirection = TextDirection.LTR
    date_format_pattern: str = "yyyy-MM-dd"
    number_format_options: NumberFormatOptions = field(default_factory=NumberFormatOptions)

    @property
    def is_rtl(self) -> bool:
        """Check if the locale is written right-to-left."""
        return self.text_direction == TextDirection.RTL


class LocaleRegistry:
    """Ordered collection of supported locale configurations.

    Invariants (checked at construction):
        - every LocaleConfig.code is unique
        - exactly one config exists for default_code

    Example:
        >>> registry = LocaleRegistry(BUILTIN_LOCALES, DEFAULT_LOCALE)
        >>> registry.get_config("nl-NL").default_currency
        <Currency.EUR: 'EUR'>
        >>> registry.get_config("xx-YY").code
        'en-US'
    """

    __slots__ = ("_configs", "_default_code", "_prefix_map")

    def __init__(
        self,
        configs: Iterable[LocaleConfig],
        default_code: str = DEFAULT_LOCALE,
        prefix_map: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            configs: Locale configurations in registration order
            default_code: Code every unknown locale resolves to
            prefix_map: Primary language subtag -> supported code. When
                omitted, each config's primary language maps to the first
                config registered with it.

        Raises:
            RegistryError: If codes are duplicated, the default is missing,
                or the prefix map points at an unsupported code
        """
        ordered: dict[str, LocaleConfig] = {}
        for config in configs:
            if config.code in ordered:
                msg = f"Duplicate locale code in registry: '{config.code}'"
                raise RegistryError(msg)
            ordered[config.code] = config

        if default_code not in ordered:
            msg = f"Default locale '{default_code}' is not registered"
            raise RegistryError(msg)

        if prefix_map is None:
            derived: dict[str, str] = {}
            for code in ordered:
                derived.setdefault(primary_language(code), code)
            prefix_map = derived
        else:
            for prefix, code in prefix_map.items():
                if code not in ordered:
                    msg = f"Prefix '{prefix}' maps to unregistered locale '{code}'"
                    raise RegistryError(msg)

        self._configs: Mapping[str, LocaleConfig] = MappingProxyType(ordered)
        self._default_code = default_code
        self._prefix_map: Mapping[str, str] = MappingProxyType(
            {prefix.lower(): code for prefix, code in prefix_map.items()}
        )

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocaleRegistry(locales={list(self._configs)}, default={self._default_code!r})"

    def __contains__(self, code: object) -> bool:
        return code in self._configs

    def __len__(self) -> int:
        return len(self._configs)

    @property
    def default_code(self) -> str:
        """Code of the default locale."""
        return self._default_code

    @property
    def default_config(self) -> LocaleConfig:
        """Configuration of the default locale."""
        return self._configs[self._default_code]

    @property
    def supported_codes(self) -> frozenset[str]:
        """The SupportedLocaleSet: every code this registry recognizes."""
        return frozenset(self._configs)

    @property
    def prefix_map(self) -> Mapping[str, str]:
        """Read-only primary-language -> locale code map."""
        return self._prefix_map

    def is_supported(self, code: str) -> bool:
        """Check if code is a member of the supported set."""
        return code in self._configs

    def get_config(self, code: str) -> LocaleConfig:
        """Return the config for code, or the default config if unknown.

        Never raises.
        """
        return self._configs.get(code, self.default_config)

    def list_available(self) -> tuple[LocaleConfig, ...]:
        """Return all configs in registration order."""
        return tuple(self._configs.values())

    def detect_from_environment_tags(self, tags: Iterable[object]) -> str:
        """Map ordered language preferences to a supported locale code.

        Each tag is tried in order. A tag that is itself a supported code
        wins outright; otherwise its region suffix is stripped and the
        primary language is looked up in the prefix map. The first match
        wins; the default code is returned when nothing matches.

        Never raises: empty and non-string tags are skipped.

        Example:
            >>> DEFAULT_REGISTRY.detect_from_environment_tags(["nl-BE", "en-US"])
            'nl-NL'
        """
        for tag in tags:
            if not isinstance(tag, str) or not tag.strip():
                continue
            candidate = tag.strip()
            if candidate in self._configs:
                return candidate
            match = self._prefix_map.get(primary_language(candidate))
            if match is not None:
                return match
        return self._default_code


BUILTIN_LOCALES: tuple[LocaleConfig, ...] = (
    LocaleConfig(
        code="en-US",
        display_name="English (United States)",
        flag_glyph="\U0001f1fa\U0001f1f8",
        measurement_system=MeasurementSystem.IMPERIAL,
        default_currency=Currency.USD,
        text_direction=TextDirection.LTR,
        date_format_pattern="MM/dd/yyyy",
        number_format_options=NumberFormatOptions(
            style=NumberStyle.DECIMAL,
            minimum_fraction_digits=0,
            maximum_fraction_digits=2,
        ),
    ),
    LocaleConfig(
        code="nl-NL",
        display_name="Nederlands (Nederland)",
        flag_glyph="\U0001f1f3\U0001f1f1",
        measurement_system=MeasurementSystem.METRIC,
        default_currency=Currency.EUR,
        text_direction=TextDirection.LTR,
        date_format_pattern="dd-MM-yyyy",
        number_format_options=NumberFormatOptions(
            style=NumberStyle.DECIMAL,
            minimum_fraction_digits=0,
            maximum_fraction_digits=2,
        ),
    ),
)

BUILTIN_PREFIX_MAP: Mapping[str, str] = MappingProxyType({"en": "en-US", "nl": "nl-NL"})

DEFAULT_REGISTRY = LocaleRegistry(BUILTIN_LOCALES, DEFAULT_LOCALE, BUILTIN_PREFIX_MAP)


def get_config(code: str) -> LocaleConfig:
    """Look up code in the built-in registry (default config if unknown)."""
    return DEFAULT_REGISTRY.get_config(code)


def list_available() -> tuple[LocaleConfig, ...]:
    """List the built-in registry's locales in registration order."""
    return DEFAULT_REGISTRY.list_available()


def detect_from_environment_tags(tags: Iterable[object]) -> str:
    """Detect a supported locale from language tags using the built-in registry."""
    return DEFAULT_REGISTRY.detect_from_environment_tags(tags)
