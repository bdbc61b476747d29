"""Environment collaborator for the locale controller.

The controller never touches process or document globals directly. It asks
an Environment for the user's ordered language preferences and tells it to
apply the text direction and language tag after each locale change.

HeadlessEnvironment serves server-side rendering, CLIs and tests: it
records the applied attributes and reads language preferences from the
operating system when none are given.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, runtime_checkable

from recipeer_locale.enums import TextDirection
from recipeer_locale.locale_utils import get_system_languages

__all__ = ["Environment", "HeadlessEnvironment"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Environment(Protocol):
    """Protocol for the hosting environment of a LocaleController."""

    def get_preferred_languages(self) -> Sequence[str]:
        """Return the user's language tags, most preferred first."""
        ...

    def apply_direction(self, direction: TextDirection) -> None:
        """Apply a text-direction attribute to the document/root context."""
        ...

    def apply_language_tag(self, code: str) -> None:
        """Apply a language-tag attribute to the document/root context."""
        ...


class HeadlessEnvironment:
    """Environment without a document: attributes are only recorded.

    Example:
        >>> env = HeadlessEnvironment(["nl-NL", "en-US"])
        >>> env.get_preferred_languages()
        ('nl-NL', 'en-US')
        >>> env.apply_direction(TextDirection.LTR)
        >>> env.direction
        <TextDirection.LTR: 'ltr'>

    Attributes:
        direction: Last applied text direction (None until applied)
        language_tag: Last applied language tag (None until applied)
    """

    __slots__ = ("_detect", "_preferred", "direction", "language_tag")

    def __init__(
        self,
        preferred_languages: Iterable[str] | None = None,
        *,
        detect: Callable[[], Sequence[str]] = get_system_languages,
    ) -> None:
        """Initialize headless environment.

        Args:
            preferred_languages: Fixed language preferences. When None,
                preferences are detected on every call through detect.
            detect: Detection function (default: OS environment variables)
        """
        self._preferred = None if preferred_languages is None else tuple(preferred_languages)
        self._detect = detect
        self.direction: TextDirection | None = None
        self.language_tag: str | None = None

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"HeadlessEnvironment(preferred={self._preferred}, "
            f"direction={self.direction}, language_tag={self.language_tag!r})"
        )

    def get_preferred_languages(self) -> tuple[str, ...]:
        """Return fixed preferences, or detect them from the OS."""
        if self._preferred is not None:
            return self._preferred
        return tuple(self._detect())

    def apply_direction(self, direction: TextDirection) -> None:
        """Record the applied text direction."""
        logger.debug("Applying text direction %s", direction)
        self.direction = TextDirection(direction)

    def apply_language_tag(self, code: str) -> None:
        """Record the applied language tag."""
        logger.debug("Applying language tag %s", code)
        self.language_tag = code
