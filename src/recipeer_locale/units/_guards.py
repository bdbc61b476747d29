"""Input guards shared by the conversion modules.

Every conversion function accepts a single real number and rejects
NaN, infinities and non-numeric values with InvalidMeasurementError.

Python 3.13+.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Callable
from decimal import Decimal
from numbers import Real
from typing import TypeIs

from recipeer_locale.errors import InvalidMeasurementError

__all__ = ["conversion", "is_finite_measurement", "require_finite"]


def is_finite_measurement(value: object) -> TypeIs[int | float | Decimal]:
    """Type guard: Check if value is a finite real number representable as a float.

    Booleans are rejected even though bool subclasses int. Integers and
    Decimals beyond the float range are rejected too.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    try:
        return math.isfinite(float(value))
    except (OverflowError, ValueError):
        return False


def require_finite(value: object, function: str = "") -> float:
    """Return value as float, or raise if it is not a finite real number.

    Raises:
        InvalidMeasurementError: If value is NaN, infinite or not a number
    """
    if not is_finite_measurement(value):
        raise InvalidMeasurementError(value, function)
    return float(value)


def conversion(func: Callable[[float], float]) -> Callable[[float], float]:
    """Decorate a conversion so its argument is validated before use.

    The wrapped function always receives a finite float.
    """

    @functools.wraps(func)
    def wrapper(value: float) -> float:
        return func(require_finite(value, func.__name__))

    return wrapper
