"""Weight conversions between metric and imperial units.

Factors follow the values the recipe UI has always displayed, so a
converted quantity matches what users saw before.
"""

from recipeer_locale.units._guards import conversion

__all__ = [
    "OUNCES_PER_GRAM",
    "POUNDS_PER_KILOGRAM",
    "grams_to_ounces",
    "kilograms_to_pounds",
    "ounces_to_grams",
    "pounds_to_kilograms",
]

OUNCES_PER_GRAM: float = 0.035274
POUNDS_PER_KILOGRAM: float = 2.20462


@conversion
def grams_to_ounces(grams: float) -> float:
    """Convert grams to avoirdupois ounces.

    Example:
        >>> round(grams_to_ounces(453.592), 3)
        16.0
    """
    return grams * OUNCES_PER_GRAM


@conversion
def ounces_to_grams(ounces: float) -> float:
    """Convert avoirdupois ounces to grams."""
    return ounces / OUNCES_PER_GRAM


@conversion
def kilograms_to_pounds(kilograms: float) -> float:
    """Convert kilograms to pounds."""
    return kilograms * POUNDS_PER_KILOGRAM


@conversion
def pounds_to_kilograms(pounds: float) -> float:
    """Convert pounds to kilograms."""
    return pounds / POUNDS_PER_KILOGRAM
