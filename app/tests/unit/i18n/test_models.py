"""Tests for translation_manager.i18n.models module."""

import pytest

from translation_manager.i18n.models import (
    DEFAULT_LOCALE,
    Locale,
    PluralMode,
    TextDirection,
)


class TestLocale:
    """Tests for Locale model."""

    def test_key_with_region(self):
        """key joins language and region with an underscore."""
        assert Locale("en", "US").key == "en_US"
        assert Locale("pt", "BR").key == "pt_BR"

    def test_key_without_region(self):
        """key is the bare language code without a region."""
        assert Locale("fr").key == "fr"

    def test_str_is_key(self):
        """__str__() returns the locale key."""
        assert str(Locale("es", "ES")) == "es_ES"

    def test_equality_by_value(self):
        """Locales with equal fields are equal and hash alike."""
        assert Locale("en", "US") == Locale("en", "US")
        assert Locale("en", "US") != Locale("en", "GB")
        assert Locale("en") != Locale("en", "US")
        assert len({Locale("en", "US"), Locale("en", "US")}) == 1

    def test_locale_is_immutable(self):
        """Locale is frozen."""
        locale = Locale("en", "US")
        with pytest.raises(AttributeError):
            locale.language = "fr"

    def test_default_locale(self):
        """DEFAULT_LOCALE is en_US."""
        assert DEFAULT_LOCALE == Locale("en", "US")

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("en", Locale("en")),
            ("en_US", Locale("en", "US")),
            ("en-US", Locale("en", "US")),
            ("EN-us", Locale("en", "US")),
            ("en_US.UTF-8", Locale("en", "US")),
            ("de_DE@euro", Locale("de", "DE")),
            (" fr ", Locale("fr")),
            ("es-419", Locale("es", "419")),
            ("fil_PH", Locale("fil", "PH")),
        ],
    )
    def test_from_string_valid(self, value, expected):
        """from_string() accepts common locale spellings."""
        assert Locale.from_string(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "en_US_POSIX", "e1_US", "_US", "english", "en_USA", "en_", "*"],
    )
    def test_from_string_invalid(self, value):
        """from_string() raises ValueError for malformed strings."""
        with pytest.raises(ValueError):
            Locale.from_string(value)


class TestTextDirection:
    """Tests for Locale.text_direction."""

    @pytest.mark.parametrize("language", ["ar", "fa", "he", "ur", "yi", "ji"])
    def test_rtl_languages(self, language):
        """Arabic, Persian, Hebrew, Urdu and Yiddish are right-to-left."""
        assert Locale(language).text_direction is TextDirection.RTL

    @pytest.mark.parametrize("language", ["en", "es", "fr", "de", "pt"])
    def test_ltr_languages(self, language):
        """Other languages are left-to-right."""
        assert Locale(language).text_direction is TextDirection.LTR

    def test_region_is_ignored(self):
        """Direction depends on the language only."""
        assert Locale("ar", "AE").text_direction is TextDirection.RTL
        assert Locale("en", "AE").text_direction is TextDirection.LTR


class TestPluralMode:
    """Tests for PluralMode enum."""

    def test_values(self):
        """PluralMode values match the configuration strings."""
        assert PluralMode("simple") is PluralMode.SIMPLE
        assert PluralMode("inject_count") is PluralMode.INJECT_COUNT
