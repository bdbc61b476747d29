"""Exception hierarchy for recipeer-locale.

Every error raised by this package derives from LocaleCoreError so callers
can catch the whole family with one clause. Errors that signal a bad
argument also derive from ValueError.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "FormattingError",
    "InvalidMeasurementError",
    "LocaleControllerError",
    "LocaleCoreError",
    "RegistryError",
    "StorageUnavailableError",
    "TranslationLoadError",
    "UnknownLocaleError",
]


class LocaleCoreError(Exception):
    """Base exception for all recipeer-locale errors."""


class UnknownLocaleError(LocaleCoreError, ValueError):
    """Locale code is not a member of the registry's supported set.

    Raised by LocaleController.change_locale(). The controller state is
    left untouched when this is raised.

    Attributes:
        code: The rejected locale code
        supported: Codes the registry does accept
    """

    def __init__(self, code: str, supported: frozenset[str] | None = None) -> None:
        """Initialize UnknownLocaleError.

        Args:
            code: The rejected locale code
            supported: Supported codes, included in the message when given
        """
        self.code = code
        self.supported = supported or frozenset()
        if self.supported:
            choices = ", ".join(sorted(self.supported))
            message = f"Unknown locale '{code}'. Supported locales: {choices}"
        else:
            message = f"Unknown locale '{code}'"
        super().__init__(message)


class InvalidMeasurementError(LocaleCoreError, ValueError):
    """Unit conversion received a non-finite or non-numeric value.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: object, function: str = "") -> None:
        """Initialize InvalidMeasurementError.

        Args:
            value: The rejected input
            function: Name of the conversion that rejected it
        """
        self.value = value
        self.function = function
        where = f" in {function}()" if function else ""
        super().__init__(f"Invalid measurement {value!r}{where}: expected a finite number")


class RegistryError(LocaleCoreError, ValueError):
    """Locale registry was constructed with inconsistent configuration."""


class LocaleControllerError(LocaleCoreError, RuntimeError):
    """Controller operation is not valid in the current lifecycle state."""


class StorageUnavailableError(LocaleCoreError):
    """Persisted preference store cannot be read or written.

    Raised by PreferenceStore implementations. The controller catches it and
    keeps the locale preference in memory for the rest of the session.
    """


class TranslationLoadError(LocaleCoreError):
    """A translation bundle could not be loaded or was malformed.

    Used inside translation providers to drive the fallback chain; it never
    escapes TranslationProvider.load_translations().

    Attributes:
        locale: Locale whose bundle failed to load
    """

    def __init__(self, message: str, *, locale: str) -> None:
        """Initialize TranslationLoadError.

        Args:
            message: Description of the failure
            locale: Locale whose bundle failed to load
        """
        super().__init__(message)
        self.locale = locale


class FormattingError(LocaleCoreError):
    """Raised when locale-aware formatting fails.

    Indicates a failure in number, date, or currency formatting. The error
    carries a fallback_value callers can render instead of the formatted
    output.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
