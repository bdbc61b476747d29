"""Enumerations for recipeer-locale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
values found in persisted data and JSON payloads.

Python 3.13+.
"""

from enum import StrEnum


class MeasurementSystem(StrEnum):
    """Measurement system a locale prefers for recipe quantities.

    StrEnum provides automatic string conversion: str(MeasurementSystem.METRIC) == "metric"
    """

    METRIC = "metric"
    """Grams, milliliters, centimeters, degrees Celsius"""

    IMPERIAL = "imperial"
    """Ounces, cups, inches, degrees Fahrenheit"""


class TextDirection(StrEnum):
    """Writing direction applied to the hosting document."""

    LTR = "ltr"
    """Left-to-right scripts (Latin, Cyrillic, ...)"""

    RTL = "rtl"
    """Right-to-left scripts (Arabic, Hebrew, ...)"""


class Currency(StrEnum):
    """ISO 4217 currency codes supported by the application."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"


class NumberStyle(StrEnum):
    """Style of plain number formatting."""

    DECIMAL = "decimal"
    PERCENT = "percent"


class QuantityKind(StrEnum):
    """Physical quantity handled by the unit conversion engine."""

    TEMPERATURE = "temperature"
    WEIGHT = "weight"
    VOLUME = "volume"
    LENGTH = "length"


class ControllerState(StrEnum):
    """Lifecycle state of a LocaleController.

    UNINITIALIZED -> INITIALIZING -> READY <-> TRANSITIONING -> READY
    """

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    TRANSITIONING = "transitioning"


__all__ = [
    "ControllerState",
    "Currency",
    "MeasurementSystem",
    "NumberStyle",
    "QuantityKind",
    "TextDirection",
]
