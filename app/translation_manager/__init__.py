"""Translation manager - key based translations for application UIs.

Components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation resolver, loaders and locale negotiation
- services: Application-scoped providers (get_settings, get_translation_resolver)
"""

from translation_manager.i18n import Locale, TextDirection, TranslationResolver
from translation_manager.i18n.shortcuts import tr, tr_params, tr_plural

__all__ = [
    "Locale",
    "TextDirection",
    "TranslationResolver",
    "tr",
    "tr_params",
    "tr_plural",
]
