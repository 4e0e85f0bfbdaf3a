"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the settings and the
translation resolver.
"""

from functools import lru_cache

from translation_manager.configuration import Settings
from translation_manager.i18n.factory import create_resolver
from translation_manager.i18n.resolver import TranslationResolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests call get_settings.cache_clear() to pick up a changed environment.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_resolver() -> TranslationResolver:
    """
    Get application-scoped translation resolver.

    Components that can be handed a resolver explicitly should take one as
    a constructor argument instead; this provider backs the tr() shortcuts.

    Returns:
        TranslationResolver: Cached resolver built from get_settings().
    """
    return create_resolver(get_settings())
