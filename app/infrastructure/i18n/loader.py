"""Translation loading.

Defines the loader contract and the YAML implementation that reads
``<domain>.<locale>.yml`` files from a directory.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

import yaml

import structlog
from infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a specific locale.

        Raises:
            FileNotFoundError: If no translation source exists for the locale.
            ValueError: If the translation source cannot be parsed.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for every locale the source provides."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Every ``*.<locale>.yml`` file in ``translations_dir`` is merged into the
    catalog for that locale, in file name order.

    Attributes:
        translations_dir: Directory containing the YAML files.
        cache: Loaded catalogs keyed by locale, when caching is enabled.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        catalog = TranslationCatalog(locale=locale)
        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(catalog, data, yaml_file)

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load every locale that has at least one file in the directory.

        Raises:
            ValueError: If no file names a supported locale.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "member_groups.en-US.yml" -> "en-US"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2:
                try:
                    locales_found.add(Locale.from_string(parts[-1]))
                except ValueError:
                    continue

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales_found}

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Merge ``{namespace: {key: message}}`` data into catalog."""
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    file=str(source_file),
                    namespace=namespace,
                    expected="dict",
                )
                continue
            catalog.messages.setdefault(namespace, {}).update(
                {str(k): "" if v is None else str(v) for k, v in messages.items()}
            )

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
