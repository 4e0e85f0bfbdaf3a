"""Translation models for i18n system.

Defines the locale value type, the locale key used to index translation
tables, and the text direction / plural mode enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

# Outer key is a locale key ("en", "en_US"), inner mapping is key -> text.
TranslationTable = Dict[str, Dict[str, str]]

RTL_LANGUAGES = frozenset({"ar", "fa", "he", "ur", "yi", "ji"})


class TextDirection(str, Enum):
    """Script direction of a locale."""

    LTR = "ltr"
    RTL = "rtl"


class PluralMode(str, Enum):
    """How plural resolution treats the count value.

    SIMPLE only selects between singular and plural keys.
    INJECT_COUNT also exposes the count to the text as ``@count``.
    """

    SIMPLE = "simple"
    INJECT_COUNT = "inject_count"


@dataclass(frozen=True)
class Locale:
    """A language code with an optional region code.

    Frozen to ensure immutability and hashability, so locales can be
    compared by value and used in sets.

    Attributes:
        language: Language code (e.g., "en", "ar").
        region: Region code (e.g., "US"), or None.
    """

    language: str
    region: Optional[str] = None

    @property
    def key(self) -> str:
        """Return the locale key used to index translation tables.

        Returns:
            "language_REGION" when a region is set, otherwise "language".
        """
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    def __str__(self) -> str:
        return self.key

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse a locale string.

        Accepts "en", "en_US", "en-US", "es-419" and POSIX forms like
        "en_US.UTF-8" or "de_DE@euro". Language is lower-cased and region
        upper-cased.

        Args:
            locale_str: Locale string to parse.

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If the language is not 2-3 letters or the region is
                not 2 letters or 3 digits.
        """
        value = (locale_str or "").strip()
        value = value.split(".", 1)[0].split("@", 1)[0]
        parts = value.replace("-", "_").split("_")

        language = parts[0]
        region = parts[1] if len(parts) == 2 else None
        valid_language = language.isalpha() and len(language) in (2, 3)
        valid_region = region is None or (
            (region.isalpha() and len(region) == 2)
            or (region.isdigit() and len(region) == 3)
        )
        if len(parts) > 2 or not valid_language or not valid_region:
            raise ValueError(f"Unsupported locale: {locale_str!r}")

        return cls(language=language.lower(), region=region.upper() if region else None)

    @property
    def text_direction(self) -> TextDirection:
        """Direction of the locale's script, based on the language only."""
        if self.language.lower() in RTL_LANGUAGES:
            return TextDirection.RTL
        return TextDirection.LTR


DEFAULT_LOCALE = Locale("en", "US")
