"""Tests for the unit conversion engine.

Property-Based Tests:
    Round-trip tolerance for every conversion pair, rejection of non-finite input.
"""

from __future__ import annotations

import math
from decimal import Decimal

import pytest
from hypothesis import given

from recipeer_locale.enums import MeasurementSystem, QuantityKind
from recipeer_locale.errors import InvalidMeasurementError
from recipeer_locale.units import CONVERSIONS, UnitConverter, length, temperature, volume, weight
from tests.strategies.locales import measurement_values, non_finite_values

PAIRS = [
    (temperature.celsius_to_fahrenheit, temperature.fahrenheit_to_celsius),
    (weight.grams_to_ounces, weight.ounces_to_grams),
    (weight.kilograms_to_pounds, weight.pounds_to_kilograms),
    (volume.milliliters_to_cups, volume.cups_to_milliliters),
    (volume.liters_to_fluid_ounces, volume.fluid_ounces_to_liters),
    (volume.milliliters_to_tablespoons, volume.tablespoons_to_milliliters),
    (volume.milliliters_to_teaspoons, volume.teaspoons_to_milliliters),
    (length.centimeters_to_inches, length.inches_to_centimeters),
    (length.meters_to_feet, length.feet_to_meters),
]
PAIR_IDS = [forward.__name__ for forward, _ in PAIRS]
ALL_FUNCTIONS = [func for pair in PAIRS for func in pair]


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-9)


class TestKnownValues:
    """Spot checks against reference values."""

    def test_boiling_point(self) -> None:
        assert temperature.celsius_to_fahrenheit(100) == 212.0
        assert temperature.fahrenheit_to_celsius(212) == 100.0

    def test_freezing_point(self) -> None:
        assert temperature.celsius_to_fahrenheit(0) == 32.0
        assert temperature.fahrenheit_to_celsius(32) == 0.0

    def test_minus_forty_is_fixed_point(self) -> None:
        assert temperature.celsius_to_fahrenheit(-40) == -40.0

    def test_pound_in_grams_is_sixteen_ounces(self) -> None:
        assert math.isclose(weight.grams_to_ounces(453.592), 16.0, abs_tol=1e-3)

    def test_kilogram_in_pounds(self) -> None:
        assert math.isclose(weight.kilograms_to_pounds(1), 2.20462)

    def test_cup_in_milliliters(self) -> None:
        assert math.isclose(volume.cups_to_milliliters(1), 236.588, abs_tol=1e-2)

    def test_spoon_measures(self) -> None:
        assert math.isclose(volume.tablespoons_to_milliliters(1), 14.7868)
        assert math.isclose(volume.milliliters_to_teaspoons(3 * 4.92892), 3.0)

    def test_inch_in_centimeters(self) -> None:
        assert math.isclose(length.inches_to_centimeters(1), 2.54, abs_tol=1e-4)

    def test_accepts_int_and_decimal(self) -> None:
        assert length.meters_to_feet(Decimal(1)) == length.meters_to_feet(1.0)


class TestRoundTrip:
    """y_to_x(x_to_y(v)) returns v within relative tolerance."""

    @pytest.mark.parametrize(("forward", "backward"), PAIRS, ids=PAIR_IDS)
    @pytest.mark.parametrize("value", [-40.0, 0.0, 1.0, 37.5, 180.0, 453.592, 1e6])
    def test_representative_values(self, forward, backward, value: float) -> None:
        assert _close(backward(forward(value)), value)
        assert _close(forward(backward(value)), value)

    @pytest.mark.parametrize(("forward", "backward"), PAIRS, ids=PAIR_IDS)
    @given(value=measurement_values())
    def test_property(self, forward, backward, value: float) -> None:
        assert _close(backward(forward(value)), value)


class TestInvalidInput:
    """Non-finite or non-numeric input raises InvalidMeasurementError."""

    @pytest.mark.parametrize("func", ALL_FUNCTIONS, ids=lambda f: f.__name__)
    @given(value=non_finite_values())
    def test_non_finite_rejected(self, func, value: float) -> None:
        with pytest.raises(InvalidMeasurementError):
            func(value)

    @pytest.mark.parametrize("value", ["100", None, True, [1.0], Decimal("NaN")])
    def test_non_numeric_rejected(self, value: object) -> None:
        with pytest.raises(InvalidMeasurementError) as exc_info:
            temperature.celsius_to_fahrenheit(value)  # type: ignore[arg-type]
        assert exc_info.value.value is value
        assert exc_info.value.function == "celsius_to_fahrenheit"

    @pytest.mark.parametrize("value", [10**400, -(10**400), Decimal("1e400"), Decimal("-1e400")])
    def test_beyond_float_range_rejected(self, value: object) -> None:
        with pytest.raises(InvalidMeasurementError):
            weight.grams_to_ounces(value)  # type: ignore[arg-type]
        with pytest.raises(InvalidMeasurementError):
            UnitConverter.to_system(value, "celsius", MeasurementSystem.IMPERIAL)  # type: ignore[arg-type]

    def test_large_finite_values_accepted(self) -> None:
        assert math.isfinite(weight.grams_to_ounces(10**300))
        assert math.isfinite(length.meters_to_feet(Decimal("1e300")))

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="finite number"):
            weight.grams_to_ounces(float("nan"))

    def test_decorated_function_keeps_name(self) -> None:
        assert weight.grams_to_ounces.__name__ == "grams_to_ounces"


class TestConversionTable:
    """The CONVERSIONS mapping and UnitConverter facade."""

    def test_covers_every_quantity_kind(self) -> None:
        assert set(CONVERSIONS) == set(QuantityKind)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CONVERSIONS[QuantityKind.WEIGHT] = {}  # type: ignore[index]

    def test_every_function_has_its_inverse(self) -> None:
        for functions in CONVERSIONS.values():
            for name in functions:
                source, target = name.split("_to_")
                assert f"{target}_to_{source}" in functions

    def test_converter_exposes_modules(self) -> None:
        convert = UnitConverter()
        assert convert.temperature.celsius_to_fahrenheit(180) == 356.0
        assert convert.table is CONVERSIONS

    @pytest.mark.parametrize(
        ("value", "unit", "system", "expected_unit"),
        [
            (100, "celsius", MeasurementSystem.IMPERIAL, "fahrenheit"),
            (212, "fahrenheit", MeasurementSystem.METRIC, "celsius"),
            (500, "grams", MeasurementSystem.IMPERIAL, "ounces"),
            (2, "pounds", MeasurementSystem.METRIC, "kilograms"),
            (2, "cups", MeasurementSystem.METRIC, "milliliters"),
            (30, "centimeters", MeasurementSystem.IMPERIAL, "inches"),
        ],
    )
    def test_to_system_converts(
        self, value: float, unit: str, system: MeasurementSystem, expected_unit: str
    ) -> None:
        _, converted_unit = UnitConverter.to_system(value, unit, system)
        assert converted_unit == expected_unit

    def test_to_system_values(self) -> None:
        assert UnitConverter.to_system(100, "celsius", MeasurementSystem.IMPERIAL) == (
            212.0,
            "fahrenheit",
        )

    def test_to_system_same_system_unchanged(self) -> None:
        assert UnitConverter.to_system(250, "grams", MeasurementSystem.METRIC) == (250.0, "grams")
        assert UnitConverter.to_system(3, "cups", MeasurementSystem.IMPERIAL) == (3.0, "cups")

    def test_to_system_spoons_are_neutral(self) -> None:
        for system in MeasurementSystem:
            assert UnitConverter.to_system(2, "teaspoons", system) == (2.0, "teaspoons")

    def test_to_system_unknown_unit(self) -> None:
        with pytest.raises(ValueError, match="Unknown unit"):
            UnitConverter.to_system(1, "furlongs", MeasurementSystem.METRIC)

    def test_to_system_rejects_nan(self) -> None:
        with pytest.raises(InvalidMeasurementError):
            UnitConverter.to_system(float("nan"), "grams", MeasurementSystem.METRIC)

    def test_units_lists_both_systems(self) -> None:
        units = UnitConverter.units()
        assert {"celsius", "fahrenheit", "grams", "ounces", "tablespoons"} <= units
