"""recipeer-locale Quickstart - Locale State, Formatting, Units and Translations.

Demonstrates the pieces a recipe UI wires together at startup.

Scenarios covered:
1. Resolving the startup locale from language preferences
2. Switching locale and reacting through a subscription
3. Converting recipe quantities into the locale's measurement system
4. Loading bundled translations with fallback to the default locale
5. Persisting the preference across restarts with a JSON file store

Note on Remote Translations:
    Set RECIPEER_TRANSLATION_SERVICE_URL and RECIPEER_ENV=production to have
    create_translation_provider() fetch bundles over HTTP. Without them the
    bundled JSON files are used.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

from recipeer_locale import (
    HeadlessEnvironment,
    JsonFilePreferenceStore,
    LocaleConfig,
    LocaleController,
    LocaleFormatter,
    Translator,
    build_locale_context,
    create_translation_provider,
)


def example_1_startup_detection() -> None:
    """Example 1: Startup locale from environment preferences."""
    print("=" * 60)
    print("Example 1: Startup Detection (nl-BE, en-US -> nl-NL)")
    print("=" * 60)

    environment = HeadlessEnvironment(["nl-BE", "en-US"])
    controller = LocaleController(environment=environment)
    config = controller.initialize()

    print(f"  locale:      {config.code} {config.flag_glyph} {config.display_name}")
    print(f"  units:       {config.measurement_system}")
    print(f"  lang tag:    {environment.language_tag}")
    print(f"  direction:   {environment.direction}")


def example_2_switching() -> None:
    """Example 2: Switching locale with a subscriber."""
    print("\n" + "=" * 60)
    print("Example 2: Switching Locale")
    print("=" * 60)

    controller = LocaleController(initial_locale="en-US")
    formatter = LocaleFormatter(controller)

    def on_change(config: LocaleConfig) -> None:
        print(f"  -> now {config.code}: {formatter.format_currency(1234.56)}")

    with controller.subscribe(on_change):
        print(f"  start {controller.locale.code}: {formatter.format_currency(1234.56)}")
        controller.change_locale("nl-NL")
        controller.change_locale("en-US")

    print(f"  date in en-US: {formatter.format_date('2026-10-19')}")


def example_3_units() -> None:
    """Example 3: Expressing quantities in the locale's system."""
    print("\n" + "=" * 60)
    print("Example 3: Recipe Quantities")
    print("=" * 60)

    controller = LocaleController(initial_locale="en-US")
    context = build_locale_context(controller)

    for value, unit in ((180, "celsius"), (500, "grams"), (250, "milliliters")):
        converted, target = context.convert.to_system(value, unit, controller.measurement_system)
        print(f"  {value} {unit} -> {context.format_number(converted)} {target}")


def example_4_translations() -> None:
    """Example 4: Bundled translations with default-locale fallback."""
    print("\n" + "=" * 60)
    print("Example 4: Translations")
    print("=" * 60)

    async def run() -> None:
        translator = Translator(create_translation_provider())
        controller = LocaleController(initial_locale="en-US", engine=translator)
        await translator.load()

        controller.change_locale("nl-NL")
        await translator.wait_until_loaded()

        print(f"  buttons.save:    {translator.t('buttons.save')}")
        print(f"  recipe.servings: {translator.t('recipe.servings', count=4)}")
        print(f"  nutrition:       {translator.t('nutrition:calories')}")
        print(f"  missing key:     {translator.t('recipe.rating')}")

    asyncio.run(run())


def example_5_persistence(tmp_path: Path) -> None:
    """Example 5: Preference survives a restart."""
    print("\n" + "=" * 60)
    print("Example 5: Persisted Preference")
    print("=" * 60)

    store = JsonFilePreferenceStore(tmp_path / "prefs.json")
    first = LocaleController(store=store, environment=HeadlessEnvironment(["en-US"]))
    first.initialize()
    first.change_locale("nl-NL")

    restarted = LocaleController(store=store, environment=HeadlessEnvironment(["en-US"]))
    print(f"  after restart: {restarted.initialize().code}")


# Main execution
if __name__ == "__main__":
    example_1_startup_detection()
    example_2_switching()
    example_3_units()
    example_4_translations()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_5_persistence(Path(tmp_dir_main))

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
