"""Unit conversion engine for recipe quantities.

Stateless, locale-independent conversion pairs, one module per quantity
kind. Which measurement system a user sees is decided by the caller
(usually LocaleController) from LocaleConfig.measurement_system.

Submodules:
    temperature - celsius <-> fahrenheit
    weight      - grams <-> ounces, kilograms <-> pounds
    volume      - milliliters <-> cups/tablespoons/teaspoons, liters <-> fluid ounces
    length      - centimeters <-> inches, meters <-> feet

Every function raises InvalidMeasurementError for non-finite input.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from recipeer_locale.enums import MeasurementSystem, QuantityKind
from recipeer_locale.units import length, temperature, volume, weight
from recipeer_locale.units._guards import require_finite

__all__ = [
    "CONVERSIONS",
    "UnitConverter",
    "length",
    "temperature",
    "volume",
    "weight",
]

type Conversion = Callable[[float], float]


def _table(module: object, names: tuple[str, ...]) -> Mapping[str, Conversion]:
    return MappingProxyType({name: getattr(module, name) for name in names})


CONVERSIONS: Mapping[QuantityKind, Mapping[str, Conversion]] = MappingProxyType({
    QuantityKind.TEMPERATURE: _table(temperature, (
        "celsius_to_fahrenheit",
        "fahrenheit_to_celsius",
    )),
    QuantityKind.WEIGHT: _table(weight, (
        "grams_to_ounces",
        "ounces_to_grams",
        "kilograms_to_pounds",
        "pounds_to_kilograms",
    )),
    QuantityKind.VOLUME: _table(volume, (
        "milliliters_to_cups",
        "cups_to_milliliters",
        "liters_to_fluid_ounces",
        "fluid_ounces_to_liters",
        "milliliters_to_tablespoons",
        "tablespoons_to_milliliters",
        "milliliters_to_teaspoons",
        "teaspoons_to_milliliters",
    )),
    QuantityKind.LENGTH: _table(length, (
        "centimeters_to_inches",
        "inches_to_centimeters",
        "meters_to_feet",
        "feet_to_meters",
    )),
})
"""The ConversionTable: quantity kind -> function name -> conversion."""

# metric unit -> (imperial unit, metric->imperial, imperial->metric)
_SYSTEM_PAIRS: dict[str, tuple[str, Conversion, Conversion]] = {
    "celsius": ("fahrenheit", temperature.celsius_to_fahrenheit,
                temperature.fahrenheit_to_celsius),
    "grams": ("ounces", weight.grams_to_ounces, weight.ounces_to_grams),
    "kilograms": ("pounds", weight.kilograms_to_pounds, weight.pounds_to_kilograms),
    "milliliters": ("cups", volume.milliliters_to_cups, volume.cups_to_milliliters),
    "liters": ("fluid_ounces", volume.liters_to_fluid_ounces, volume.fluid_ounces_to_liters),
    "centimeters": ("inches", length.centimeters_to_inches, length.inches_to_centimeters),
    "meters": ("feet", length.meters_to_feet, length.feet_to_meters),
}
_IMPERIAL_TO_METRIC: dict[str, tuple[str, Conversion]] = {
    imperial: (metric, back) for metric, (imperial, _, back) in _SYSTEM_PAIRS.items()
}
# Spoon measures are used unchanged in both systems.
_NEUTRAL_UNITS = frozenset({"tablespoons", "teaspoons"})


class UnitConverter:
    """Namespace exposing the conversion modules to consumers.

    This is the ``convert`` value handed to UI components: attributes give
    direct access to the function pairs, and to_system() moves a quantity
    into a locale's preferred measurement system.

    Example:
        >>> convert = UnitConverter()
        >>> convert.temperature.celsius_to_fahrenheit(180)
        356.0
        >>> convert.to_system(100, "celsius", MeasurementSystem.IMPERIAL)
        (212.0, 'fahrenheit')
    """

    __slots__ = ()

    temperature = temperature
    weight = weight
    volume = volume
    length = length

    @property
    def table(self) -> Mapping[QuantityKind, Mapping[str, Conversion]]:
        """The full ConversionTable."""
        return CONVERSIONS

    @staticmethod
    def units() -> frozenset[str]:
        """All unit names understood by to_system()."""
        return frozenset(_SYSTEM_PAIRS) | frozenset(_IMPERIAL_TO_METRIC) | _NEUTRAL_UNITS

    @staticmethod
    def to_system(value: float, unit: str, system: MeasurementSystem) -> tuple[float, str]:
        """Express a quantity in the given measurement system.

        Quantities already in the target system, and spoon measures, are
        returned unchanged (after validation).

        Args:
            value: Finite quantity
            unit: Unit name, e.g. "grams", "cups", "fahrenheit"
            system: Target measurement system

        Returns:
            (converted value, unit name) tuple

        Raises:
            InvalidMeasurementError: If value is not finite
            ValueError: If unit is unknown
        """
        finite = require_finite(value, "to_system")
        if unit in _NEUTRAL_UNITS:
            return finite, unit
        if unit in _SYSTEM_PAIRS:
            if system == MeasurementSystem.METRIC:
                return finite, unit
            imperial_unit, forward, _ = _SYSTEM_PAIRS[unit]
            return forward(finite), imperial_unit
        if unit in _IMPERIAL_TO_METRIC:
            if system == MeasurementSystem.IMPERIAL:
                return finite, unit
            metric_unit, back = _IMPERIAL_TO_METRIC[unit]
            return back(finite), metric_unit
        msg = f"Unknown unit '{unit}'"
        raise ValueError(msg)
