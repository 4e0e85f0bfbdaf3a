"""Application-scoped service providers."""

from translation_manager.services.providers import (
    get_settings,
    get_translation_resolver,
)

__all__ = ["get_settings", "get_translation_resolver"]
