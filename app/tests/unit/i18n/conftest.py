"""Feature-level fixtures for i18n system tests.

Provides resolvers, translation tables and YAML translation directories.
"""

import pytest
import yaml

from translation_manager.i18n import YAMLTranslationLoader
from tests.factories.i18n import make_resolver, make_translation_table


@pytest.fixture
def translation_table():
    """Standard en_US / es_ES / fr translation table."""
    return make_translation_table()


@pytest.fixture
def resolver():
    """TranslationResolver loaded with the standard table, en_US active."""
    resolver = make_resolver()
    yield resolver
    resolver.reset()


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en_US.yml
    - home.en_US.yml
    - es_ES.yml
    - fr.yml
    """
    translations_dir = tmp_path / "locales"
    translations_dir.mkdir()

    en_us = {
        "hello": "Hello",
        "welcome": "Welcome @name",
        "item": "item",
        "item_plural": "items",
    }
    with open(translations_dir / "en_US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us, f)

    en_us_home = {
        "home": {
            "title": "Home",
            "subtitle": "Welcome back, @name",
        }
    }
    with open(translations_dir / "home.en_US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_home, f)

    es_es = {
        "hello": "Hola",
        "welcome": "Bienvenido @name",
    }
    with open(translations_dir / "es_ES.yml", "w", encoding="utf-8") as f:
        yaml.dump(es_es, f, allow_unicode=True)

    fr = {"hello": "Bonjour"}
    with open(translations_dir / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f)

    return translations_dir


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)
