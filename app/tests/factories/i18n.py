"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Locale
- Translation tables
- TranslationResolver
"""

from typing import Optional

from translation_manager.i18n import (
    Locale,
    PluralMode,
    Translations,
    TranslationResolver,
    TranslationTable,
)


def make_locale(language: str = "en", region: Optional[str] = "US") -> Locale:
    """Create a Locale instance.

    Args:
        language: Language code.
        region: Region code, or None.

    Returns:
        Locale instance.
    """
    return Locale(language, region)


def make_translation_table() -> TranslationTable:
    """Create the standard three-locale table used across i18n tests.

    Returns:
        Table with en_US, es_ES and a region-less fr entry.
    """
    return {
        "en_US": {
            "hello": "Hello",
            "welcome": "Welcome @name",
            "item": "item",
            "item_plural": "items",
            "greeting": "Hello @name, you have @count messages",
            "cart": "@count item in cart",
            "cart_plural": "@count items in cart",
        },
        "es_ES": {
            "hello": "Hola",
            "welcome": "Bienvenido @name",
            "item": "artículo",
            "item_plural": "artículos",
        },
        "fr": {
            "hello": "Bonjour",
        },
    }


class SampleTranslations(Translations):
    """In-code translation set built from make_translation_table()."""

    @property
    def keys(self) -> TranslationTable:
        return make_translation_table()


def make_resolver(
    table: Optional[TranslationTable] = None,
    locale: Optional[Locale] = None,
    fallback_locale: Optional[Locale] = None,
    plural_mode: PluralMode = PluralMode.INJECT_COUNT,
    strict_fallback: bool = False,
) -> TranslationResolver:
    """Create a TranslationResolver loaded with translations.

    Args:
        table: Translation table (default: make_translation_table()).
        locale: Locale to activate after loading.
        fallback_locale: Fallback locale to set.
        plural_mode: Plural mode of the resolver.
        strict_fallback: Whether fallback locales are validated.

    Returns:
        TranslationResolver instance.
    """
    resolver = TranslationResolver(
        plural_mode=plural_mode, strict_fallback=strict_fallback
    )
    resolver.set_translations(table if table is not None else make_translation_table())
    if locale is not None:
        resolver.set_locale(locale)
    if fallback_locale is not None:
        resolver.set_fallback_locale(fallback_locale)
    return resolver
