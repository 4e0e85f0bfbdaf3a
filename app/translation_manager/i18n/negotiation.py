"""Locale negotiation for picking a supported locale.

Provides simple matching (exact, then language-only) of a requested locale
against the locales an application supports, and a controller that applies
the result to a TranslationResolver.
"""

from typing import Optional, Sequence

import structlog

from translation_manager.i18n.models import Locale
from translation_manager.i18n.resolver import TranslationResolver

logger = structlog.get_logger().bind(component="i18n.negotiation")


class LocaleNegotiator:
    """Matches a requested locale against supported ones.

    Matching is limited to an exact (language + region) match followed by
    a language-only match (e.g. "pt" or "pt_PT" matching "pt_BR").
    """

    @staticmethod
    def find_best_match(
        requested: Locale,
        supported: Sequence[Locale],
        default: Optional[Locale] = None,
    ) -> Optional[Locale]:
        """Find the supported locale closest to ``requested``.

        Args:
            requested: Locale asked for (e.g. the device locale).
            supported: Supported locales in preference order.
            default: Returned when nothing matches. Defaults to the first
                supported locale.

        Returns:
            Best matching supported locale, the default, or None if
            ``supported`` is empty and no default was given.
        """
        for locale in supported:
            if locale == requested:
                return locale

        for locale in supported:
            if locale.language == requested.language:
                return locale

        if default is not None:
            return default
        return supported[0] if supported else None


class LocaleController:
    """Keeps the resolver's locale within a list of supported locales.

    The controller does not notify anyone of changes; callers re-render
    after calling change_locale().

    Attributes:
        resolver: TranslationResolver being driven.
        supported_locales: Locales the application offers, first is default.
    """

    def __init__(
        self,
        resolver: TranslationResolver,
        supported_locales: Sequence[Locale],
    ):
        if not supported_locales:
            raise ValueError("At least one supported locale is required")
        self.resolver = resolver
        self.supported_locales = list(supported_locales)
        self.log = logger.bind(
            supported_locales=[locale.key for locale in self.supported_locales]
        )

    @property
    def locale(self) -> Locale:
        """The resolver's active locale."""
        return self.resolver.get_locale()

    def initialize(self, device_locale: Optional[Locale] = None) -> Locale:
        """Apply the supported locale closest to the device locale.

        Args:
            device_locale: Locale reported by the platform. When None the
                first supported locale is used.

        Returns:
            The resolver's active locale afterwards. This differs from the
            matched locale when the resolver has no translations for it.
        """
        if device_locale is None:
            matched = self.supported_locales[0]
        else:
            matched = LocaleNegotiator.find_best_match(
                device_locale, self.supported_locales
            )

        log = self.log.bind(
            device_locale=device_locale.key if device_locale else None,
            locale=matched.key,
        )
        if not self.resolver.set_locale(matched):
            log.warning("locale_initialization_rejected", kept_locale=self.locale.key)
            return self.locale

        log.info("locale_initialized")
        return matched

    def change_locale(self, locale: Locale) -> bool:
        """Switch to ``locale`` if it is supported.

        Returns:
            True if the resolver's active locale is now ``locale``.
        """
        if locale not in self.supported_locales:
            self.log.warning("unsupported_locale", locale=locale.key)
            return False
        return self.resolver.set_locale(locale)

    def change_locale_by_code(
        self, language_code: str, region_code: Optional[str] = None
    ) -> bool:
        """Switch locale by language and optional region code."""
        return self.change_locale(Locale(language_code, region_code))
