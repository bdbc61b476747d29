"""Length conversions between metric and imperial units."""

from recipeer_locale.units._guards import conversion

__all__ = [
    "FEET_PER_METER",
    "INCHES_PER_CENTIMETER",
    "centimeters_to_inches",
    "feet_to_meters",
    "inches_to_centimeters",
    "meters_to_feet",
]

INCHES_PER_CENTIMETER: float = 0.393701
FEET_PER_METER: float = 3.28084


@conversion
def centimeters_to_inches(centimeters: float) -> float:
    """Convert centimeters to inches."""
    return centimeters * INCHES_PER_CENTIMETER


@conversion
def inches_to_centimeters(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches / INCHES_PER_CENTIMETER


@conversion
def meters_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters * FEET_PER_METER


@conversion
def feet_to_meters(feet: float) -> float:
    """Convert feet to meters."""
    return feet / FEET_PER_METER
