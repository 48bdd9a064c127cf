"""Translation loading interface and implementations.

Defines the contract for loading translation dictionaries and provides
JSON and YAML file loaders.
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

import structlog
from infrastructure.i18n.models import TranslationCatalog

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to discover and parse translation
    files for different languages.
    """

    @abstractmethod
    def load(self, language: str) -> TranslationCatalog:
        """Load translations for a specific language.

        Args:
            language: Language code to load translations for.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def available_languages(self) -> List[str]:
        """List the language codes that have translation files."""
        pass

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for every available language.

        Languages whose files cannot be parsed are skipped with a warning.

        Returns:
            Dict mapping language code to TranslationCatalog.
        """
        result = {}
        for language in self.available_languages():
            try:
                result[language] = self.load(language)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "could_not_load_language", language=language, error=str(e)
                )
        return result


class FileTranslationLoader(TranslationLoader):
    """Shared logic for loaders reading one directory of files.

    Files are named ``<language><suffix>`` or ``<domain>.<language><suffix>``;
    all files of a language are merged into a single catalog in name order.

    Attributes:
        translations_dir: Path to directory containing translation files.
        cache: Cache of loaded catalogs (language -> catalog).
    """

    suffixes: tuple = ()

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize the loader.

        Args:
            translations_dir: Path to directory with translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_translation_loader",
            loader=type(self).__name__,
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files(self) -> Iterable[Path]:
        for suffix in self.suffixes:
            yield from self.translations_dir.glob(f"*{suffix}")

    @staticmethod
    def _language_of(path: Path) -> str:
        # "home.en.json" -> "en", "fr.json" -> "fr"
        return path.stem.split(".")[-1].lower()

    def available_languages(self) -> List[str]:
        return sorted({self._language_of(path) for path in self._files()})

    def load(self, language: str) -> TranslationCatalog:
        """Load translations for a language, merging all its files.

        Args:
            language: Language code to load.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no file exists for the language.
            ValueError: If parsing fails.
        """
        language = language.lower()
        if self.use_cache and language in self.cache:
            logger.debug("loaded_from_cache", language=language)
            return self.cache[language]

        files = sorted(
            path for path in self._files() if self._language_of(path) == language
        )
        if not files:
            raise FileNotFoundError(
                f"No translation files found for language {language} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(
            language=language,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        for path in files:
            data = self._parse(path)
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_translation_format", file=str(path), expected="dict"
                )
                continue
            catalog.merge(TranslationCatalog(language=language, messages=data))

        logger.info(
            "loaded_translations",
            language=language,
            file_count=len(files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[language] = catalog

        return catalog

    @abstractmethod
    def _parse(self, path: Path) -> Any:
        pass


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for ``<language>.json`` dictionaries."""

    suffixes = (".json",)

    def _parse(self, path: Path) -> Any:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for ``<language>.yml`` / ``<domain>.<language>.yml`` dictionaries."""

    suffixes = (".yml", ".yaml")

    def _parse(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e
