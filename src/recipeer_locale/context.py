"""UI boundary: the locale context value handed to consuming components.

Bundles the controller's current state and bound operations into one
immutable value, the shape UI components consume:
``{locale, available_locales, change_locale, convert, format_currency,
format_number, format_date}``.

A context value is a snapshot of ``locale``; the bound callables always act
on the live controller. Rebuild the value from a subscription to refresh
``locale``.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from recipeer_locale.controller import LocaleController
from recipeer_locale.enums import Currency
from recipeer_locale.formatting import LocaleFormatter
from recipeer_locale.registry import LocaleConfig
from recipeer_locale.units import UnitConverter

__all__ = ["LocaleContextValue", "build_locale_context"]


@dataclass(frozen=True, slots=True)
class LocaleContextValue:
    """Locale state and operations exposed to UI components.

    Attributes:
        locale: Current locale configuration (snapshot)
        available_locales: Supported locales in registration order
        change_locale: Bound LocaleController.change_locale
        convert: Unit conversion namespace
        format_currency: Bound LocaleFormatter.format_currency
        format_number: Bound LocaleFormatter.format_number
        format_date: Bound LocaleFormatter.format_date
    """

    locale: LocaleConfig
    available_locales: tuple[LocaleConfig, ...]
    change_locale: Callable[[str], LocaleConfig]
    convert: UnitConverter
    format_currency: Callable[[int | float | Decimal, Currency | str | None], str]
    format_number: Callable[[int | float | Decimal], str]
    format_date: Callable[[date | datetime | str], str]


def build_locale_context(
    controller: LocaleController,
    formatter: LocaleFormatter | None = None,
) -> LocaleContextValue:
    """Build the context value for controller.

    Raises:
        LocaleControllerError: If the controller is not initialized
    """
    fmt = formatter if formatter is not None else LocaleFormatter(controller)
    return LocaleContextValue(
        locale=controller.locale,
        available_locales=controller.available_locales,
        change_locale=controller.change_locale,
        convert=controller.convert,
        format_currency=fmt.format_currency,
        format_number=fmt.format_number,
        format_date=fmt.format_date,
    )
