"""Locale configurations used to extend the built-in registry in tests."""

from __future__ import annotations

from recipeer_locale.enums import Currency, MeasurementSystem, TextDirection
from recipeer_locale.registry import LocaleConfig

__all__ = ["AR_SA"]

AR_SA = LocaleConfig(
    code="ar-SA",
    display_name="العربية (السعودية)",
    flag_glyph="\U0001f1f8\U0001f1e6",
    measurement_system=MeasurementSystem.METRIC,
    default_currency=Currency.USD,
    text_direction=TextDirection.RTL,
    date_format_pattern="dd/MM/yyyy",
)
