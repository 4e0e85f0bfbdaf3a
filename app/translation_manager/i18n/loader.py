"""Translation sources and loader implementations.

Defines the contract for producing translation tables and provides a
YAML-based loader. Tables are always built eagerly and handed to
TranslationResolver.set_translations() in one piece.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

import structlog
import yaml

from translation_manager.i18n.models import Locale, TranslationTable

logger = structlog.get_logger()


class Translations(ABC):
    """Base class for translation sets defined in code.

    Example:
        class AppTranslations(Translations):
            @property
            def keys(self):
                return {
                    "en_US": {"hello": "Hello"},
                    "es_ES": {"hello": "Hola"},
                }
    """

    @property
    @abstractmethod
    def keys(self) -> TranslationTable:
        """Full table mapping locale key -> (translation key -> text)."""


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation files
    for different locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> Dict[str, str]:
        """Load translations for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            Mapping of translation key -> text.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> TranslationTable:
        """Load translations for every locale the source provides.

        Returns:
            Full table keyed by locale key.
        """


class TranslationYAMLLoader(yaml.SafeLoader):
    """SafeLoader that reads every plain scalar as text.

    Only null is resolved implicitly. YAML 1.1 would otherwise turn labels
    like ``yes``, ``No`` or ``off`` into booleans and ``1e3`` into a float.
    """

    yaml_implicit_resolvers = {
        first: [
            (tag, regexp)
            for tag, regexp in resolvers
            if tag == "tag:yaml.org,2002:null"
        ]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named <locale_key>.yml or <domain>.<locale_key>.yml
    (e.g. "en_US.yml", "home.es_ES.yml"). Nested mappings are flattened
    into dot-separated keys, so ``home: {title: Home}`` yields "home.title".
    Scalars keep their literal text (``confirm: Yes`` stays "Yes").

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Cache of loaded translations (locale key -> messages).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded translations in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, str]] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> Dict[str, str]:
        """Load translations for a locale from YAML files.

        All files for the locale are merged in filename order; later files
        override earlier ones.

        Args:
            locale: Locale to load.

        Returns:
            Mapping of translation key -> text.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale.key in self.cache:
            logger.debug("loaded_from_cache", locale=locale.key)
            return dict(self.cache[locale.key])

        yaml_files = [
            path
            for path in sorted(self.translations_dir.glob("*.yml"))
            if path.stem.split(".")[-1] == locale.key
        ]

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.key} in {self.translations_dir}"
            )

        messages: Dict[str, str] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.load(f, Loader=TranslationYAMLLoader)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            self._flatten(data, "", messages, yaml_file)

        logger.info(
            "loaded_translations",
            locale=locale.key,
            file_count=len(yaml_files),
            key_count=len(messages),
        )

        if self.use_cache:
            self.cache[locale.key] = dict(messages)

        return messages

    def load_all(self) -> TranslationTable:
        """Load translations for all locales found in the directory.

        Returns:
            Full table keyed by locale key.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            locale_str = yaml_file.stem.split(".")[-1]
            try:
                locale = Locale.from_string(locale_str)
            except ValueError:
                logger.warning("unrecognized_locale_file", file=str(yaml_file))
                continue
            # Only canonical names ("en_US", not "en-US") can ever be matched
            if locale.key == locale_str:
                locales_found.add(locale)
            else:
                logger.warning("unrecognized_locale_file", file=str(yaml_file))

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {
            locale.key: self.load(locale)
            for locale in sorted(locales_found, key=lambda loc: loc.key)
        }

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _flatten(
        self,
        data: Mapping[str, Any],
        prefix: str,
        messages: Dict[str, str],
        source_file: Path,
    ) -> None:
        for name, value in data.items():
            if not isinstance(name, str) or not name:
                logger.warning(
                    "invalid_translation_key",
                    key=repr(name),
                    prefix=prefix,
                    file=str(source_file),
                )
                continue

            key = f"{prefix}{name}"
            if isinstance(value, dict):
                self._flatten(value, f"{key}.", messages, source_file)
            elif value is None:
                logger.warning("empty_translation_value", key=key, file=str(source_file))
            elif isinstance(value, str):
                messages[key] = value
            else:
                logger.warning(
                    "invalid_translation_value",
                    key=key,
                    value_type=type(value).__name__,
                    file=str(source_file),
                )
