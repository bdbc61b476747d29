"""Bundle sources for the local translation provider.

Provides the protocol for reading one namespace's JSON for one locale,
a filesystem implementation with path-traversal security, and an
in-memory implementation for embedded resources.

Components:
    BundleSource - Protocol for reading namespace JSON (structural typing)
    PathBundleSource - Disk-based source with path-traversal prevention
    MappingBundleSource - Source backed by an in-memory mapping
    packaged_source - Source for the JSON files shipped with this package

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from recipeer_locale.translation.types import LocaleCode, Namespace

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "BundleSource",
    # Concrete sources
    "PathBundleSource",
    "MappingBundleSource",
    "packaged_source",
    "PACKAGED_LOCALES_DIR",
]

PACKAGED_LOCALES_DIR: Path = Path(__file__).parent / "locales"


class BundleSource(Protocol):
    """Protocol for reading translation resources for specific locales.

    Implementations must provide a read() method that retrieves the JSON
    source of one namespace for one locale.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom sources.

    Example:
        >>> class DiskSource:
        ...     def read(self, locale: str, namespace: str) -> str:
        ...         return Path(f"locales/{locale}/{namespace}.json").read_text("utf-8")
        ...     def describe_path(self, locale: str, namespace: str) -> str:
        ...         return f"locales/{locale}/{namespace}.json"
        ...
        >>> provider = LocalTranslationProvider(DiskSource())
    """

    def read(self, locale: LocaleCode, namespace: Namespace) -> str:
        """Read the JSON source of a namespace.

        Raises:
            FileNotFoundError: If the resource doesn't exist for this locale
            OSError: If the resource cannot be read
        """

    def describe_path(self, locale: LocaleCode, namespace: Namespace) -> str:
        """Return human-readable location for diagnostics."""
        return f"{locale}/{namespace}.json"


@dataclass(frozen=True, slots=True)
class PathBundleSource:
    """File system bundle source using path templates.

    Uses a {locale} placeholder in the path template for locale
    substitution; namespaces are read from "<namespace>.json" inside it.

    Security:
        Validates both locale and namespace to prevent directory traversal.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> source = PathBundleSource("locales/{locale}")
        >>> source.read("nl-NL", "common")
        # Reads: locales/nl-NL/common.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    def _path_for(self, locale: LocaleCode, namespace: Namespace) -> Path:
        locale_path = self.base_path.replace("{locale}", locale)
        return Path(locale_path) / f"{namespace}.json"

    def _safe_path_for(self, locale: LocaleCode, namespace: Namespace) -> Path:
        """Resolve the namespace file, refusing anything outside the root.

        Raises:
            ValueError: If a segment is empty, contains a separator or "..",
                or the resolved file lies outside the root directory
        """
        for kind, segment in (("locale", locale), ("namespace", namespace)):
            if not segment:
                msg = f"{kind} cannot be empty"
                raise ValueError(msg)
            if ".." in segment or "/" in segment or "\\" in segment:
                msg = f"Unsafe {kind} for a bundle path: '{segment}'"
                raise ValueError(msg)

        full_path = self._path_for(locale, namespace).resolve()
        if not full_path.is_relative_to(self._resolved_root):
            msg = f"Bundle path for {locale}/{namespace} escapes {self._resolved_root}"
            raise ValueError(msg)
        return full_path

    def describe_path(self, locale: LocaleCode, namespace: Namespace) -> str:
        """Return the locale-substituted file path."""
        return str(self._path_for(locale, namespace))

    def read(self, locale: LocaleCode, namespace: Namespace) -> str:
        """Read a namespace file from disk.

        Raises:
            ValueError: If locale or namespace contains path traversal sequences
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
        """
        return self._safe_path_for(locale, namespace).read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class MappingBundleSource:
    """Bundle source backed by an in-memory locale -> namespace -> data mapping.

    Namespace data may be a JSON string or an already-decoded object, which
    is re-encoded so that every source hands the provider JSON text.

    Example:
        >>> source = MappingBundleSource({"en-US": {"common": {"hello": "Hello"}}})
        >>> source.read("en-US", "common")
        '{"hello": "Hello"}'
    """

    resources: Mapping[LocaleCode, Mapping[Namespace, object]]

    def describe_path(self, locale: LocaleCode, namespace: Namespace) -> str:
        """Return a pseudo path for diagnostics."""
        return f"memory://{locale}/{namespace}.json"

    def read(self, locale: LocaleCode, namespace: Namespace) -> str:
        """Return the namespace's JSON source.

        Raises:
            FileNotFoundError: If the locale or namespace is not present
        """
        try:
            data = self.resources[locale][namespace]
        except KeyError:
            msg = f"No resource for {self.describe_path(locale, namespace)}"
            raise FileNotFoundError(msg) from None
        if isinstance(data, str):
            return data
        return json.dumps(data, ensure_ascii=False)


def packaged_source() -> PathBundleSource:
    """Return a source reading the bundles shipped inside this package."""
    return PathBundleSource(
        str(PACKAGED_LOCALES_DIR / "{locale}"),
        root_dir=str(PACKAGED_LOCALES_DIR),
    )
