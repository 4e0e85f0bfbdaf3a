"""i18n system - translation lookup for application UIs.

Provides a translation table keyed by locale, fallback-locale resolution,
``@name`` placeholder substitution and singular/plural selection.

Main components:
- models: Locale, TextDirection, PluralMode
- resolver: TranslationResolver, the lookup and interpolation service
- loader: Translations, TranslationLoader and YAMLTranslationLoader
- negotiation: LocaleNegotiator and LocaleController for picking a locale
- factory: create_resolver() for building a configured resolver

The tr()/tr_params()/tr_plural() shortcuts live in
translation_manager.i18n.shortcuts.
"""

from translation_manager.i18n.factory import create_resolver
from translation_manager.i18n.loader import (
    TranslationLoader,
    Translations,
    YAMLTranslationLoader,
)
from translation_manager.i18n.models import (
    DEFAULT_LOCALE,
    RTL_LANGUAGES,
    Locale,
    PluralMode,
    TextDirection,
    TranslationTable,
)
from translation_manager.i18n.negotiation import LocaleController, LocaleNegotiator
from translation_manager.i18n.resolver import TranslationResolver

__all__ = [
    "DEFAULT_LOCALE",
    "RTL_LANGUAGES",
    "Locale",
    "PluralMode",
    "TextDirection",
    "TranslationTable",
    "Translations",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "TranslationResolver",
    "LocaleNegotiator",
    "LocaleController",
    "create_resolver",
]
