"""Factory functions for creating i18n components.

Provides a convenience function for building a TranslationResolver from
application settings.
"""

from pathlib import Path
from typing import Optional

import structlog

from translation_manager.configuration import Settings
from translation_manager.i18n.loader import Translations, YAMLTranslationLoader
from translation_manager.i18n.models import Locale, PluralMode
from translation_manager.i18n.resolver import TranslationResolver

logger = structlog.get_logger()


def create_resolver(
    settings: Optional[Settings] = None,
    translations: Optional[Translations] = None,
    translations_dir: Optional[Path] = None,
) -> TranslationResolver:
    """Create and configure a TranslationResolver instance.

    The table comes from ``translations`` when given, otherwise from the
    YAML files in ``translations_dir`` (or settings.i18n.translations_dir).
    With neither, the resolver starts with an empty table.

    Args:
        settings: Application settings (default: Settings() from environment)
        translations: In-code translation set
        translations_dir: Directory of YAML translation files

    Returns:
        TranslationResolver: Configured resolver instance

    Raises:
        ValueError: If a configured locale cannot be parsed or the
            translations directory does not exist

    Usage:
        # From environment
        resolver = create_resolver()

        # From an in-code translation set
        resolver = create_resolver(translations=AppTranslations())
    """
    settings = settings or Settings()
    i18n = settings.i18n

    resolver = TranslationResolver(
        default_locale=Locale.from_string(i18n.default_locale),
        plural_mode=PluralMode(i18n.plural_mode),
        strict_fallback=i18n.strict_fallback,
    )

    source_dir = translations_dir or i18n.translations_dir
    if translations is not None:
        resolver.set_translations(translations.keys)
    elif source_dir is not None:
        loader = YAMLTranslationLoader(source_dir, use_cache=i18n.use_cache)
        resolver.set_translations(loader.load_all())

    if i18n.fallback_locale:
        resolver.set_fallback_locale(Locale.from_string(i18n.fallback_locale))

    logger.info(
        "resolver_created",
        default_locale=resolver.default_locale.key,
        fallback_locale=i18n.fallback_locale,
        locale_count=len(resolver.get_available_locales()),
        plural_mode=resolver.plural_mode.value,
    )
    return resolver
