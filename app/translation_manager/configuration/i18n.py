"""Internationalization feature settings."""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from translation_manager.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation resolver configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale active at start-up and after reset (default: en_US)
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing (default: unset)
        I18N_TRANSLATIONS_DIR: Directory of YAML translation files (default: unset)
        I18N_PLURAL_MODE: 'inject_count' or 'simple' (default: inject_count)
        I18N_STRICT_FALLBACK: Reject fallback locales absent from the table (default: False)
        I18N_USE_CACHE: Cache parsed YAML files in the loader (default: True)

    Example:
        ```python
        from translation_manager.services import get_settings

        settings = get_settings()

        if settings.i18n.translations_dir:
            # Load translation files...
        ```
    """

    default_locale: str = Field(
        default="en_US",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale active at start-up and restored by reset()",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted when the active locale lacks a key",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory holding <locale>.yml translation files",
    )
    plural_mode: Literal["simple", "inject_count"] = Field(
        default="inject_count",
        alias="I18N_PLURAL_MODE",
        description="Whether plural resolution exposes @count to the text",
    )
    strict_fallback: bool = Field(
        default=False,
        alias="I18N_STRICT_FALLBACK",
        description="Only accept fallback locales present in the table",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache parsed translation files in memory",
    )

    @field_validator("fallback_locale", "translations_dir", mode="before")
    @classmethod
    def _empty_as_none(cls, v: Optional[Any]) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v
