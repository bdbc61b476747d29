"""Hypothesis strategies for recipeer-locale property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

- locales: language preference tags, unknown locale codes, measurement values

Usage:
    from tests.strategies import language_tags, measurement_values
    from tests.strategies.locales import unknown_locale_codes

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - language_tags, measurement_values
"""

from .locales import (
    language_tags,
    measurement_values,
    non_finite_values,
    unknown_locale_codes,
)

__all__ = [
    "language_tags",
    "measurement_values",
    "non_finite_values",
    "unknown_locale_codes",
]
