"""Translation bundle validation and freezing.

Raw bundles arrive as parsed JSON: a mapping of namespace -> (possibly
nested) objects whose leaves are strings. They are validated, flattened
with KEY_SEPARATOR and wrapped in read-only mappings before any caller
sees them, so a bundle cannot change after it is cached.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from types import MappingProxyType

from recipeer_locale.constants import KEY_SEPARATOR
from recipeer_locale.errors import TranslationLoadError
from recipeer_locale.translation.types import LocaleCode, NamespaceBundle, TranslationBundle

__all__ = [
    "EMPTY_BUNDLE",
    "flatten_namespace",
    "freeze_bundle",
    "parse_namespace_json",
]

EMPTY_BUNDLE: TranslationBundle = MappingProxyType({})


def flatten_namespace(
    data: object,
    *,
    locale: LocaleCode,
    namespace: str,
) -> NamespaceBundle:
    """Flatten a nested namespace object into key -> string form.

    Example:
        >>> flatten_namespace({"buttons": {"save": "Save"}}, locale="en-US", namespace="common")
        mappingproxy({'buttons.save': 'Save'})

    Raises:
        TranslationLoadError: If data is not an object or a leaf is not a string
    """
    if not isinstance(data, Mapping):
        msg = f"Namespace '{namespace}' must be an object, got {type(data).__name__}"
        raise TranslationLoadError(msg, locale=locale)

    flat: dict[str, str] = {}
    stack: list[tuple[str, Mapping[object, object]]] = [("", data)]
    while stack:
        prefix, node = stack.pop()
        for key, value in node.items():
            if not isinstance(key, str) or not key:
                msg = f"Invalid key {key!r} in namespace '{namespace}'"
                raise TranslationLoadError(msg, locale=locale)
            full_key = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key
            if isinstance(value, str):
                flat[full_key] = value
            elif isinstance(value, Mapping):
                stack.append((full_key, value))
            else:
                msg = (
                    f"Value of '{namespace}:{full_key}' must be a string or object, "
                    f"got {type(value).__name__}"
                )
                raise TranslationLoadError(msg, locale=locale)
    return MappingProxyType(dict(sorted(flat.items())))


def freeze_bundle(raw: object, *, locale: LocaleCode) -> TranslationBundle:
    """Validate a raw namespace -> object payload and return a read-only bundle.

    Raises:
        TranslationLoadError: If the payload is not a mapping of namespace objects
    """
    if not isinstance(raw, Mapping):
        msg = f"Translation bundle must be an object, got {type(raw).__name__}"
        raise TranslationLoadError(msg, locale=locale)

    frozen: dict[str, NamespaceBundle] = {}
    for namespace, data in raw.items():
        if not isinstance(namespace, str) or not namespace:
            msg = f"Invalid namespace name {namespace!r}"
            raise TranslationLoadError(msg, locale=locale)
        frozen[namespace] = flatten_namespace(data, locale=locale, namespace=namespace)
    return MappingProxyType(frozen)


def parse_namespace_json(source: str, *, locale: LocaleCode, namespace: str) -> object:
    """Decode one namespace's JSON source.

    Raises:
        TranslationLoadError: If source is not valid JSON
    """
    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in namespace '{namespace}': {e}"
        raise TranslationLoadError(msg, locale=locale) from e
