"""Persisted preference stores.

The locale preference is one string under one key in a client-side
key-value store. Stores raise StorageUnavailableError when they cannot be
read or written (quota exceeded, storage disabled, unreadable file); the
controller catches it and keeps the preference in memory only.

Components:
    PreferenceStore - Protocol (structural typing)
    InMemoryPreferenceStore - Dict-backed store, lives as long as the process
    JsonFilePreferenceStore - JSON object on disk, survives restarts

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from recipeer_locale.errors import StorageUnavailableError

__all__ = ["InMemoryPreferenceStore", "JsonFilePreferenceStore", "PreferenceStore"]

logger = logging.getLogger(__name__)


@runtime_checkable
class PreferenceStore(Protocol):
    """Protocol for a string key-value preference store."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent.

        Raises:
            StorageUnavailableError: If the store cannot be read
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key.

        Raises:
            StorageUnavailableError: If the store cannot be written
        """
        ...


class InMemoryPreferenceStore:
    """Preference store backed by a dict.

    Example:
        >>> store = InMemoryPreferenceStore({"recipeer-locale": "nl-NL"})
        >>> store.get("recipeer-locale")
        'nl-NL'
    """

    __slots__ = ("_values",)

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"InMemoryPreferenceStore({self._values!r})"

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFilePreferenceStore:
    """Preference store persisting a flat JSON object to a file.

    The file is read on every get() so that several processes sharing one
    profile see each other's writes. Writes replace the file atomically.

    Example:
        >>> store = JsonFilePreferenceStore(Path("~/.config/recipeer/prefs.json").expanduser())
        >>> store.set("recipeer-locale", "nl-NL")
    """

    __slots__ = ("path",)

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"JsonFilePreferenceStore({str(self.path)!r})"

    def _read_all(self) -> dict[str, str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            msg = f"Cannot read preferences from {self.path}: {e}"
            raise StorageUnavailableError(msg) from e
        except UnicodeDecodeError as e:
            msg = f"Corrupt preference file {self.path}: {e}"
            raise StorageUnavailableError(msg) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Corrupt preference file {self.path}: {e}"
            raise StorageUnavailableError(msg) from e
        if not isinstance(data, dict):
            msg = f"Corrupt preference file {self.path}: expected a JSON object"
            raise StorageUnavailableError(msg)
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            values = self._read_all()
        except StorageUnavailableError:
            logger.warning("Overwriting unreadable preference file %s", self.path)
            values = {}
        values[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".prefs-", suffix=".tmp")
        except OSError as e:
            msg = f"Cannot write preferences to {self.path}: {e}"
            raise StorageUnavailableError(msg) from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(values, handle, ensure_ascii=False, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            msg = f"Cannot write preferences to {self.path}: {e}"
            raise StorageUnavailableError(msg) from e
