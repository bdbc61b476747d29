"""Tests for the package's public API surface and error hierarchy."""

from __future__ import annotations

import pytest

import recipeer_locale
from recipeer_locale import (
    FormattingError,
    InvalidMeasurementError,
    LocaleControllerError,
    LocaleCoreError,
    RegistryError,
    StorageUnavailableError,
    UnknownLocaleError,
)
from recipeer_locale.errors import TranslationLoadError


class TestPublicApi:
    """Test what `import recipeer_locale` exposes."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        missing = [name for name in recipeer_locale.__all__ if not hasattr(recipeer_locale, name)]
        assert missing == []

    def test_version_is_string(self) -> None:
        assert isinstance(recipeer_locale.__version__, str)
        assert recipeer_locale.__version__

    def test_end_to_end(self) -> None:
        """Controller, formatter and converter cooperate through the top-level API."""
        controller = recipeer_locale.LocaleController(
            environment=recipeer_locale.HeadlessEnvironment(["nl-BE"])
        )
        controller.initialize()
        context = recipeer_locale.build_locale_context(controller)

        assert context.locale.code == "nl-NL"
        assert context.format_number(1234.5) == "1.234,5"
        value, unit = context.convert.to_system(
            1, "cups", recipeer_locale.MeasurementSystem.METRIC
        )
        assert unit == "milliliters"
        assert value == pytest.approx(236.588, abs=1e-2)


class TestErrorHierarchy:
    """Test that every error derives from LocaleCoreError."""

    @pytest.mark.parametrize(
        "error_type",
        [
            UnknownLocaleError,
            InvalidMeasurementError,
            RegistryError,
            LocaleControllerError,
            StorageUnavailableError,
            TranslationLoadError,
            FormattingError,
        ],
    )
    def test_single_root(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, LocaleCoreError)

    @pytest.mark.parametrize(
        "error_type", [UnknownLocaleError, InvalidMeasurementError, RegistryError]
    )
    def test_argument_errors_are_value_errors(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, ValueError)

    def test_controller_error_is_runtime_error(self) -> None:
        assert issubclass(LocaleControllerError, RuntimeError)

    def test_unknown_locale_message_lists_choices(self) -> None:
        error = UnknownLocaleError("xx-YY", frozenset({"nl-NL", "en-US"}))
        assert str(error) == "Unknown locale 'xx-YY'. Supported locales: en-US, nl-NL"
        assert str(UnknownLocaleError("xx-YY")) == "Unknown locale 'xx-YY'"

    def test_translation_load_error_carries_locale(self) -> None:
        error = TranslationLoadError("missing", locale="nl-NL")
        assert error.locale == "nl-NL"
        assert str(error) == "missing"
