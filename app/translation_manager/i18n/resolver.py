"""Translation resolver for looking up and interpolating translated text.

Owns the translation table together with the active and fallback locale.
Resolution never raises: a key with no translation renders as itself.
"""

import re
import threading
from typing import Any, Dict, List, Mapping, Optional

from translation_manager.i18n.models import (
    DEFAULT_LOCALE,
    Locale,
    PluralMode,
    TextDirection,
    TranslationTable,
)
from translation_manager.logging import get_module_logger

logger = get_module_logger()


class TranslationResolver:
    """Resolves translation keys against the active locale.

    Lookup order is active locale, then fallback locale, then the raw key.
    Placeholders are written as ``@name`` and replaced from ``params``.

    Attributes:
        default_locale: Locale active at construction and after reset().
        plural_mode: Whether resolve_plural() injects ``@count``.
        strict_fallback: Whether set_fallback_locale() requires the locale
            to be present in the table.
    """

    def __init__(
        self,
        default_locale: Locale = DEFAULT_LOCALE,
        plural_mode: PluralMode = PluralMode.INJECT_COUNT,
        strict_fallback: bool = False,
    ):
        self.default_locale = default_locale
        self.plural_mode = PluralMode(plural_mode)
        self.strict_fallback = strict_fallback
        self._lock = threading.RLock()
        self._translations: TranslationTable = {}
        self._locale: Locale = default_locale
        self._fallback_locale: Optional[Locale] = None

    def set_translations(self, translations: Mapping[str, Mapping[str, str]]) -> None:
        """Replace the whole translation table.

        No merge with the previous table takes place. Locale keys are not
        validated; a key that no Locale produces is simply never matched.

        Args:
            translations: Mapping of locale key -> (translation key -> text).
        """
        table = {
            locale_key: dict(messages) for locale_key, messages in translations.items()
        }
        with self._lock:
            self._translations = table
        logger.info("translations_set", locale_count=len(table))

    def set_locale(self, locale: Locale) -> bool:
        """Make ``locale`` active if the table has an entry for it.

        Args:
            locale: Candidate locale.

        Returns:
            True if the locale became active, False if it was rejected and
            the previous locale was kept.
        """
        with self._lock:
            if locale.key not in self._translations:
                logger.warning(
                    "locale_not_available",
                    locale=locale.key,
                    current_locale=self._locale.key,
                )
                return False
            self._locale = locale
        logger.info("locale_changed", locale=locale.key)
        return True

    def set_fallback_locale(self, locale: Locale) -> bool:
        """Set the locale consulted when the active locale lacks a key.

        The fallback is stored even if the table has no entry for it,
        unless ``strict_fallback`` is enabled.

        Args:
            locale: Fallback locale.

        Returns:
            True if the fallback was stored.
        """
        with self._lock:
            available = locale.key in self._translations
            if not available and self.strict_fallback:
                logger.warning("fallback_locale_not_available", locale=locale.key)
                return False
            self._fallback_locale = locale

        if not available:
            logger.warning("fallback_locale_without_translations", locale=locale.key)
        return True

    def clear_fallback_locale(self) -> None:
        """Unset the fallback locale."""
        with self._lock:
            self._fallback_locale = None

    def get_locale(self) -> Locale:
        """Get the active locale."""
        return self._locale

    def get_fallback_locale(self) -> Optional[Locale]:
        """Get the fallback locale, or None if unset."""
        return self._fallback_locale

    def resolve(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Retrieve and interpolate the text for a translation key.

        Args:
            key: Translation key.
            params: Optional mapping of placeholder name -> value. Every
                ``@name`` in the text is replaced by ``str(value)``.

        Returns:
            The translated text, or the key itself when no translation
            exists in the active or fallback locale.
        """
        with self._lock:
            text = self._lookup(key)

        if text is None:
            logger.debug("translation_missing", key=key, locale=self._locale.key)
            text = key

        if params is not None:
            text = self._interpolate(text, params)

        return text

    def resolve_plural(
        self,
        singular_key: str,
        plural_key: str,
        count: int,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve the singular or plural form depending on ``count``.

        Only ``count == 1`` selects the singular key; zero and every other
        value select the plural key. Languages with more plural categories
        are not modelled.

        In INJECT_COUNT mode ``count`` is available as ``@count``; a
        ``count`` entry in ``params`` takes precedence over it.

        Args:
            singular_key: Key used when count is 1.
            plural_key: Key used otherwise.
            count: Number of items.
            params: Optional placeholder values.

        Returns:
            Resolved and interpolated text.
        """
        key = singular_key if count == 1 else plural_key

        if self.plural_mode is PluralMode.INJECT_COUNT:
            merged: Dict[str, Any] = {"count": count}
            merged.update(params or {})
            return self.resolve(key, merged)

        return self.resolve(key, params)

    @staticmethod
    def text_direction_for(locale: Locale) -> TextDirection:
        """Classify a locale as left-to-right or right-to-left."""
        return locale.text_direction

    def text_direction(self, locale: Optional[Locale] = None) -> TextDirection:
        """Text direction of ``locale``, or of the active locale."""
        return self.text_direction_for(locale or self._locale)

    def is_rtl(self, locale: Optional[Locale] = None) -> bool:
        """Whether ``locale`` (default: the active locale) is right-to-left."""
        return self.text_direction(locale) is TextDirection.RTL

    def has_translation(self, key: str, locale: Optional[Locale] = None) -> bool:
        """Check if ``key`` is translated in ``locale`` (default: active).

        The fallback locale is not consulted.
        """
        target = locale or self._locale
        with self._lock:
            return key in self._translations.get(target.key, {})

    def get_available_locales(self) -> List[Locale]:
        """Get the locales that have an entry in the table.

        Entries whose key no Locale can produce are left out.
        """
        with self._lock:
            locale_keys = list(self._translations)

        locales = []
        for locale_key in locale_keys:
            try:
                locale = Locale.from_string(locale_key)
            except ValueError:
                continue
            if locale.key == locale_key:
                locales.append(locale)
        return locales

    def get_translations(self, locale: Optional[Locale] = None) -> Dict[str, str]:
        """Get a copy of the translations of ``locale`` (default: active)."""
        target = locale or self._locale
        with self._lock:
            return dict(self._translations.get(target.key, {}))

    def reset(self) -> None:
        """Clear the table and restore the default and fallback locales."""
        with self._lock:
            self._translations = {}
            self._locale = self.default_locale
            self._fallback_locale = None
        logger.info("resolver_reset", locale=self.default_locale.key)

    def _lookup(self, key: str) -> Optional[str]:
        text = self._translations.get(self._locale.key, {}).get(key)

        if text is None and self._fallback_locale is not None:
            text = self._translations.get(self._fallback_locale.key, {}).get(key)
            if text is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=self._locale.key,
                    fallback_locale=self._fallback_locale.key,
                )

        return text

    def _interpolate(self, text: str, params: Mapping[str, Any]) -> str:
        """Replace ``@name`` tokens in a single pass.

        Replaced values are never scanned again, so a value containing
        ``@other`` stays as it is. Longer names are tried first so that
        ``@names`` is not consumed by a ``name`` parameter.
        """
        names = sorted((name for name in params if name), key=len, reverse=True)
        if not names:
            return text

        pattern = re.compile("@(" + "|".join(re.escape(name) for name in names) + ")")
        return pattern.sub(lambda match: str(params[match.group(1)]), text)
