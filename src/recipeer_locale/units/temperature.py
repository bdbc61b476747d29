"""Temperature conversions between degrees Celsius and Fahrenheit."""

from recipeer_locale.units._guards import conversion

__all__ = ["celsius_to_fahrenheit", "fahrenheit_to_celsius"]


@conversion
def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit.

    Example:
        >>> celsius_to_fahrenheit(100)
        212.0
    """
    return celsius * 9 / 5 + 32


@conversion
def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius.

    Example:
        >>> fahrenheit_to_celsius(212)
        100.0
    """
    return (fahrenheit - 32) * 5 / 9
