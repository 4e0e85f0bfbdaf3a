"""Call-site shortcuts for translating keys.

Thin wrappers over TranslationResolver. Each accepts an explicit resolver;
without one the application-scoped resolver from the service providers
is used.

Usage:
    from translation_manager.i18n.shortcuts import tr, tr_params, tr_plural

    title = tr("hello")
    greeting = tr_params("welcome", {"name": "John"})
    label = tr_plural("item", "item_plural", count)
"""

from typing import Any, Mapping, Optional

from translation_manager.i18n.resolver import TranslationResolver
from translation_manager.services.providers import get_translation_resolver


def tr(key: str, resolver: Optional[TranslationResolver] = None) -> str:
    """Translate ``key``."""
    return (resolver or get_translation_resolver()).resolve(key)


def tr_params(
    key: str,
    params: Optional[Mapping[str, Any]] = None,
    resolver: Optional[TranslationResolver] = None,
) -> str:
    """Translate ``key`` and fill in ``@name`` placeholders."""
    return (resolver or get_translation_resolver()).resolve(key, params)


def tr_plural(
    key: str,
    plural_key: str,
    count: int,
    params: Optional[Mapping[str, Any]] = None,
    resolver: Optional[TranslationResolver] = None,
) -> str:
    """Translate ``key`` when count is 1, ``plural_key`` otherwise."""
    return (resolver or get_translation_resolver()).resolve_plural(
        key, plural_key, count, params
    )
