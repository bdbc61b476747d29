"""Pytest configuration for the recipeer-locale test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os
from collections.abc import Mapping

import pytest
from hypothesis import Phase, Verbosity, settings

from recipeer_locale.environment import HeadlessEnvironment
from recipeer_locale.locale_utils import clear_locale_cache
from recipeer_locale.storage import InMemoryPreferenceStore
from tests.helpers.sources import EN_US_RESOURCES, NL_NL_RESOURCES, CountingSource

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def resources() -> dict[str, Mapping[str, object]]:
    """Locale -> namespace -> data for the built-in registry's locales."""
    return {"en-US": EN_US_RESOURCES, "nl-NL": NL_NL_RESOURCES}


@pytest.fixture
def counting_source(resources: dict[str, Mapping[str, object]]) -> CountingSource:
    """In-memory bundle source that records how often each locale is read."""
    return CountingSource(resources)


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    """Empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture
def environment() -> HeadlessEnvironment:
    """Headless environment preferring Dutch."""
    return HeadlessEnvironment(["nl-NL"])


@pytest.fixture(autouse=True)
def _fresh_babel_cache() -> None:
    """Isolate tests from each other's cached Babel locales."""
    clear_locale_cache()
