"""Volume conversions between metric and US customary units."""

from recipeer_locale.units._guards import conversion

__all__ = [
    "CUPS_PER_MILLILITER",
    "FLUID_OUNCES_PER_LITER",
    "MILLILITERS_PER_TABLESPOON",
    "MILLILITERS_PER_TEASPOON",
    "cups_to_milliliters",
    "fluid_ounces_to_liters",
    "liters_to_fluid_ounces",
    "milliliters_to_cups",
    "milliliters_to_tablespoons",
    "milliliters_to_teaspoons",
    "tablespoons_to_milliliters",
    "teaspoons_to_milliliters",
]

CUPS_PER_MILLILITER: float = 0.00422675
FLUID_OUNCES_PER_LITER: float = 33.814
MILLILITERS_PER_TABLESPOON: float = 14.7868
MILLILITERS_PER_TEASPOON: float = 4.92892


@conversion
def milliliters_to_cups(milliliters: float) -> float:
    """Convert milliliters to US cups."""
    return milliliters * CUPS_PER_MILLILITER


@conversion
def cups_to_milliliters(cups: float) -> float:
    """Convert US cups to milliliters."""
    return cups / CUPS_PER_MILLILITER


@conversion
def liters_to_fluid_ounces(liters: float) -> float:
    """Convert liters to US fluid ounces."""
    return liters * FLUID_OUNCES_PER_LITER


@conversion
def fluid_ounces_to_liters(fluid_ounces: float) -> float:
    """Convert US fluid ounces to liters."""
    return fluid_ounces / FLUID_OUNCES_PER_LITER


@conversion
def milliliters_to_tablespoons(milliliters: float) -> float:
    """Convert milliliters to US tablespoons."""
    return milliliters / MILLILITERS_PER_TABLESPOON


@conversion
def tablespoons_to_milliliters(tablespoons: float) -> float:
    """Convert US tablespoons to milliliters."""
    return tablespoons * MILLILITERS_PER_TABLESPOON


@conversion
def milliliters_to_teaspoons(milliliters: float) -> float:
    """Convert milliliters to US teaspoons."""
    return milliliters / MILLILITERS_PER_TEASPOON


@conversion
def teaspoons_to_milliliters(teaspoons: float) -> float:
    """Convert US teaspoons to milliliters."""
    return teaspoons * MILLILITERS_PER_TEASPOON
