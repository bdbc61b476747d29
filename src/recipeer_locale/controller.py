"""Locale controller: owner of the current-locale state.

A LocaleController holds one application's current locale, resolves it at
startup, persists and applies changes, and notifies subscribers. There are
no module-level globals: several controllers can coexist (tests,
multi-tenant embeds), each with its own registry, store and environment.

Lifecycle:
    UNINITIALIZED -> INITIALIZING -> READY <-> TRANSITIONING -> READY

Initialization order:
    1. Persisted preference (if supported)
    2. default_locale override (if supported)
    3. Environment language preferences via the registry's prefix map
    4. Registry default

Translation bundles are never awaited here. An optional translation engine
(see Translator) is told about changes and may also report changes of its
own; those are reconciled without calling back into the engine, which
breaks the notification cycle between the two.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from recipeer_locale.constants import STORAGE_KEY
from recipeer_locale.enums import ControllerState, MeasurementSystem
from recipeer_locale.environment import Environment, HeadlessEnvironment
from recipeer_locale.errors import (
    LocaleControllerError,
    StorageUnavailableError,
    UnknownLocaleError,
)
from recipeer_locale.registry import DEFAULT_REGISTRY, LocaleConfig, LocaleRegistry
from recipeer_locale.storage import InMemoryPreferenceStore, PreferenceStore
from recipeer_locale.units import UnitConverter

__all__ = ["LocaleController", "LocaleListener", "Subscription", "TranslationEngine"]

logger = logging.getLogger(__name__)

type LocaleListener = Callable[[LocaleConfig], None]


class TranslationEngine(Protocol):
    """Lower-level translation engine kept in sync with the controller."""

    @property
    def language(self) -> str:
        """The engine's active language."""
        ...

    def change_language(self, code: str) -> None:
        """Switch the engine's active language."""
        ...

    def on_language_changed(self, listener: Callable[[str], None]) -> None:
        """Register a listener for the engine's language changes."""
        ...

    def off_language_changed(self, listener: Callable[[str], None]) -> None:
        """Remove a listener registered with on_language_changed()."""
        ...


class Subscription:
    """Handle returned by LocaleController.subscribe().

    Calling unsubscribe() more than once is harmless.
    """

    __slots__ = ("_controller", "listener")

    def __init__(self, controller: LocaleController, listener: LocaleListener) -> None:
        self._controller: LocaleController | None = controller
        self.listener = listener

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Subscription(listener={self.listener!r}, active={self.active})"

    @property
    def active(self) -> bool:
        """Check if the listener is still subscribed."""
        return self._controller is not None and self._controller.is_subscribed(self.listener)

    def unsubscribe(self) -> None:
        """Stop receiving locale changes."""
        if self._controller is not None:
            self._controller.unsubscribe(self.listener)
            self._controller = None

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unsubscribe()


class LocaleController:
    """Owns the current locale and propagates changes.

    Example:
        >>> controller = LocaleController(environment=HeadlessEnvironment(["nl-BE"]))
        >>> controller.initialize().code
        'nl-NL'
        >>> sub = controller.subscribe(lambda config: print(config.code))
        >>> _ = controller.change_locale("en-US")
        en-US
        >>> controller.change_locale("xx-YY")
        Traceback (most recent call last):
            ...
        recipeer_locale.errors.UnknownLocaleError: Unknown locale 'xx-YY'. ...
    """

    __slots__ = (
        "_converter",
        "_current",
        "_default_locale",
        "_engine",
        "_environment",
        "_registry",
        "_state",
        "_store",
        "_subscribers",
    )

    def __init__(
        self,
        *,
        registry: LocaleRegistry = DEFAULT_REGISTRY,
        store: PreferenceStore | None = None,
        environment: Environment | None = None,
        engine: TranslationEngine | None = None,
        default_locale: str | None = None,
        initial_locale: str | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            registry: Supported locales
            store: Persisted preference store (default: in-memory)
            environment: Hosting environment (default: headless, OS languages)
            engine: Translation engine to keep in sync
            default_locale: Preferred locale when nothing is persisted,
                tried before environment detection
            initial_locale: Start READY with this locale instead of
                running initialize()

        Raises:
            UnknownLocaleError: If initial_locale is not supported
        """
        self._registry = registry
        self._store: PreferenceStore = store if store is not None else InMemoryPreferenceStore()
        self._environment: Environment = (
            environment if environment is not None else HeadlessEnvironment()
        )
        self._engine = engine
        self._default_locale = default_locale
        self._converter = UnitConverter()
        self._subscribers: dict[LocaleListener, Subscription] = {}
        self._current: LocaleConfig | None = None
        self._state = ControllerState.UNINITIALIZED

        if initial_locale is not None:
            self._require_supported(initial_locale)
            self._current = registry.get_config(initial_locale)
            self._state = ControllerState.READY

        if engine is not None:
            engine.on_language_changed(self.handle_engine_language_changed)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        code = self._current.code if self._current is not None else None
        return f"LocaleController(state={self._state}, locale={code!r})"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> ControllerState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_ready(self) -> bool:
        """Check if the controller has a current locale."""
        return self._state == ControllerState.READY

    @property
    def locale(self) -> LocaleConfig:
        """Configuration of the current locale.

        Raises:
            LocaleControllerError: If the controller is not initialized
        """
        if self._current is None:
            msg = "LocaleController is not initialized; call initialize() first"
            raise LocaleControllerError(msg)
        return self._current

    @property
    def available_locales(self) -> tuple[LocaleConfig, ...]:
        """All supported locales in registration order."""
        return self._registry.list_available()

    @property
    def measurement_system(self) -> MeasurementSystem:
        """Measurement system preferred by the current locale."""
        return self.locale.measurement_system

    @property
    def convert(self) -> UnitConverter:
        """Unit conversion namespace for consumers."""
        return self._converter

    @property
    def registry(self) -> LocaleRegistry:
        """The registry this controller validates against."""
        return self._registry

    @property
    def engine(self) -> TranslationEngine | None:
        """The translation engine kept in sync, if any."""
        return self._engine

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> LocaleConfig:
        """Resolve the startup locale and become READY.

        Idempotent: a READY controller returns its current locale.
        """
        if self._current is not None and self._state == ControllerState.READY:
            return self._current

        previous = self._state
        self._state = ControllerState.INITIALIZING
        try:
            code = self._resolve_startup_locale()
            config = self._registry.get_config(code)
            self._apply_environment(config)
        except BaseException:
            self._state = previous
            raise
        self._current = config
        self._state = ControllerState.READY
        logger.debug("Locale controller ready with %s", config.code)

        if self._engine is not None and self._engine.language != config.code:
            self._engine.change_language(config.code)
        return config

    def _resolve_startup_locale(self) -> str:
        stored = self._read_preference()
        if stored is not None:
            if self._registry.is_supported(stored):
                return stored
            logger.warning("Ignoring unsupported persisted locale %r", stored)

        if self._default_locale is not None:
            if self._registry.is_supported(self._default_locale):
                return self._default_locale
            logger.warning("Ignoring unsupported default locale %r", self._default_locale)

        return self._registry.detect_from_environment_tags(
            self._environment.get_preferred_languages()
        )

    def close(self) -> None:
        """Detach from the translation engine and drop all subscribers."""
        if self._engine is not None:
            self._engine.off_language_changed(self.handle_engine_language_changed)
        self._subscribers.clear()

    # ------------------------------------------------------------------
    # Changes
    # ------------------------------------------------------------------

    def change_locale(self, code: str) -> LocaleConfig:
        """Switch to code, persist it, apply it and notify subscribers.

        Steps: validate, TRANSITIONING, persist, apply direction and
        language tag, update current locale, READY, inform the translation
        engine, notify subscribers in subscription order.

        A failing store or environment leaves the previous locale and state
        in place and the error propagates.

        Returns:
            The new current locale configuration

        Raises:
            UnknownLocaleError: If code is not supported (state unchanged)
            LocaleControllerError: If the controller is not initialized
        """
        self._require_supported(code)
        if self._current is None:
            msg = "LocaleController is not initialized; call initialize() first"
            raise LocaleControllerError(msg)

        config = self._registry.get_config(code)
        previous = self._state
        self._state = ControllerState.TRANSITIONING
        try:
            self._write_preference(code)
            self._apply_environment(config)
        except BaseException:
            self._state = previous
            raise
        self._current = config
        self._state = ControllerState.READY

        if self._engine is not None:
            self._engine.change_language(code)
        self._notify(config)
        return config

    def handle_engine_language_changed(self, code: str) -> None:
        """Reconcile a language change reported by the translation engine.

        Adopts code without calling back into the engine and without
        persisting it. Unsupported codes and the current code are ignored.
        """
        if self._current is not None and code == self._current.code:
            return
        if not self._registry.is_supported(code):
            logger.debug("Ignoring engine language change to unsupported %r", code)
            return

        config = self._registry.get_config(code)
        self._apply_environment(config)
        self._current = config
        self._state = ControllerState.READY
        self._notify(config)

    def _require_supported(self, code: str) -> None:
        if not self._registry.is_supported(code):
            raise UnknownLocaleError(code, self._registry.supported_codes)

    def _apply_environment(self, config: LocaleConfig) -> None:
        self._environment.apply_direction(config.text_direction)
        self._environment.apply_language_tag(config.code)

    def _read_preference(self) -> str | None:
        try:
            return self._store.get(STORAGE_KEY)
        except StorageUnavailableError as e:
            logger.warning("Locale preference unavailable, using detection: %s", e)
            return None

    def _write_preference(self, code: str) -> None:
        try:
            self._store.set(STORAGE_KEY, code)
        except StorageUnavailableError as e:
            logger.warning("Locale preference not persisted, kept for this session: %s", e)

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    def subscribe(self, listener: LocaleListener) -> Subscription:
        """Register listener for every successful locale change.

        Listeners are called synchronously, in subscription order, with the
        new LocaleConfig. Subscribing an already registered listener returns
        its existing Subscription.
        """
        subscription = self._subscribers.get(listener)
        if subscription is None:
            subscription = Subscription(self, listener)
            self._subscribers[listener] = subscription
        return subscription

    def unsubscribe(self, listener: LocaleListener) -> None:
        """Remove listener. Safe to call from inside a listener."""
        self._subscribers.pop(listener, None)

    def is_subscribed(self, listener: LocaleListener) -> bool:
        """Check if listener is registered."""
        return listener in self._subscribers

    @property
    def subscriber_count(self) -> int:
        """Number of registered listeners."""
        return len(self._subscribers)

    def _notify(self, config: LocaleConfig) -> None:
        # Iterate over a snapshot; skip listeners removed during this round.
        for listener in tuple(self._subscribers):
            if listener in self._subscribers:
                listener(config)
