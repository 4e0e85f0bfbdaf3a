import pytest

from translation_manager.services.providers import get_settings, get_translation_resolver


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Drop application-scoped singletons so tests never share state."""
    get_settings.cache_clear()
    get_translation_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_translation_resolver.cache_clear()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test away from any .env file and I18N_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "PREFIX",
        "LOG_LEVEL",
        "I18N_DEFAULT_LOCALE",
        "I18N_FALLBACK_LOCALE",
        "I18N_TRANSLATIONS_DIR",
        "I18N_PLURAL_MODE",
        "I18N_STRICT_FALLBACK",
        "I18N_USE_CACHE",
    ):
        monkeypatch.delenv(name, raising=False)
