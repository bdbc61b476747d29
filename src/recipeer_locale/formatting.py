"""Formatting facade bound to a locale controller.

Provides currency, number and date formatting for whatever locale the
controller holds at call time. Nothing is cached per locale here: a locale
change is visible on the very next call without re-subscription. Babel
Locale objects themselves are cached by locale_utils.get_babel_locale().

Architecture:
    - LocaleFormatter reads controller.locale on every call
    - Patterns are derived from LocaleConfig.number_format_options and
      LocaleConfig.date_format_pattern
    - Babel supplies CLDR separators, symbols and currency placement
    - Babel failures raise FormattingError carrying a fallback value

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from babel import UnknownLocaleError as BabelUnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from recipeer_locale.enums import Currency, NumberStyle
from recipeer_locale.errors import FormattingError
from recipeer_locale.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

    from recipeer_locale.controller import LocaleController
    from recipeer_locale.registry import LocaleConfig, NumberFormatOptions

__all__ = ["LocaleFormatter", "build_number_pattern"]

logger = logging.getLogger(__name__)

type Number = int | float | Decimal

# Numeric part of a CLDR currency pattern, e.g. "#,##0.00" in "¤#,##0.00"
_CURRENCY_NUMBER = re.compile(r"[#0,]*0(?:\.[0#]+)?")


def build_number_pattern(options: NumberFormatOptions, *, use_grouping: bool = True) -> str:
    """Build a CLDR number pattern from fraction-digit options.

    '#,##0' = integer with grouping
    '#,##0.0##' = 1-3 decimal places with grouping
    '0.00' = exactly 2 decimal places, no grouping

    Example:
        >>> build_number_pattern(NumberFormatOptions(minimum_fraction_digits=0,
        ...                                          maximum_fraction_digits=2))
        '#,##0.##'
    """
    integer_part = "#,##0" if use_grouping else "0"
    minimum = options.minimum_fraction_digits
    maximum = options.maximum_fraction_digits
    if maximum == 0:
        return integer_part
    required = "0" * minimum
    optional = "#" * (maximum - minimum)
    return f"{integer_part}.{required}{optional}"


class LocaleFormatter:
    """Locale-aware formatting for the controller's current locale.

    Example:
        >>> controller = LocaleController(initial_locale="en-US")
        >>> fmt = LocaleFormatter(controller)
        >>> fmt.format_currency(1234.56)
        '$1,234.56'
        >>> _ = controller.change_locale("nl-NL")
        >>> fmt.format_number(1234.5)
        '1.234,5'
    """

    __slots__ = ("_controller",)

    def __init__(self, controller: LocaleController) -> None:
        self._controller = controller

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocaleFormatter(controller={self._controller!r})"

    @property
    def _config(self) -> LocaleConfig:
        return self._controller.locale

    @staticmethod
    def _babel_locale(config: LocaleConfig) -> Locale:
        try:
            return get_babel_locale(config.code)
        except (BabelUnknownLocaleError, ValueError) as e:
            msg = f"No CLDR data for locale '{config.code}': {e}"
            raise FormattingError(msg, fallback_value="") from e

    def format_currency(self, amount: Number, currency: Currency | str | None = None) -> str:
        """Format amount as currency.

        Uses the locale's default currency unless currency is given. The
        locale's CLDR currency pattern decides symbol placement; fraction
        digits come from the locale's number_format_options.

        Raises:
            FormattingError: If Babel cannot format the value
        """
        config = self._config
        code = str(currency) if currency is not None else str(config.default_currency)
        try:
            babel_locale = self._babel_locale(config)
            standard = babel_locale.currency_formats["standard"]
            number_pattern = build_number_pattern(config.number_format_options)
            pattern = _CURRENCY_NUMBER.sub(number_pattern, standard.pattern)
            return str(
                babel_numbers.format_currency(
                    amount,
                    code,
                    format=pattern,
                    locale=babel_locale,
                    currency_digits=False,
                )
            )
        except FormattingError as e:
            e.fallback_value = f"{code} {amount}"
            raise
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = f"{code} {amount}"
            msg = f"Currency formatting failed for '{code} {amount}' in {config.code}: {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    def format_number(self, value: Number) -> str:
        """Format value with the locale's separators and fraction digits.

        Raises:
            FormattingError: If Babel cannot format the value
        """
        config = self._config
        options = config.number_format_options
        try:
            babel_locale = self._babel_locale(config)
            pattern = build_number_pattern(options)
            if options.style == NumberStyle.PERCENT:
                return str(
                    babel_numbers.format_percent(value, format=f"{pattern}%", locale=babel_locale)
                )
            return str(babel_numbers.format_decimal(value, format=pattern, locale=babel_locale))
        except FormattingError as e:
            e.fallback_value = str(value)
            raise
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Number formatting failed for '{value}' in {config.code}: {e}"
            raise FormattingError(msg, fallback_value=str(value)) from e

    def format_date(self, value: date | datetime | str) -> str:
        """Format a date with the locale's date_format_pattern.

        Args:
            value: date, datetime, or ISO 8601 string ("2025-10-27",
                "2025-10-27T14:30:00")

        Raises:
            FormattingError: If value is not ISO 8601 or Babel fails
        """
        config = self._config
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value)
            except ValueError as e:
                msg = f"Invalid date string '{value}': not ISO 8601 format"
                raise FormattingError(msg, fallback_value=value) from e

        try:
            babel_locale = self._babel_locale(config)
            return str(
                babel_dates.format_date(
                    value, format=config.date_format_pattern, locale=babel_locale
                )
            )
        except FormattingError as e:
            e.fallback_value = value.isoformat()
            raise
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            msg = f"Date formatting failed for '{value}' in {config.code}: {e}"
            raise FormattingError(msg, fallback_value=value.isoformat()) from e

    def currency_symbol(self, currency: Currency | str | None = None) -> str:
        """Return the locale's symbol for currency (default: locale currency).

        Example:
            >>> LocaleFormatter(LocaleController(initial_locale="nl-NL")).currency_symbol()
            '€'
        """
        config = self._config
        code = str(currency) if currency is not None else str(config.default_currency)
        try:
            return str(babel_numbers.get_currency_symbol(code, locale=self._babel_locale(config)))
        except FormattingError as e:
            logger.debug("Falling back to currency code for %s: %s", code, e)
            return code
