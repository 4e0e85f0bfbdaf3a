"""Configuration module - public API.

Exports:
    Settings: Main settings class
    I18nSettings: Translation resolver settings class

Example:
    ```python
    from translation_manager.services import get_settings

    settings = get_settings()
    fallback = settings.i18n.fallback_locale
    ```
"""

from translation_manager.configuration.i18n import I18nSettings
from translation_manager.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
