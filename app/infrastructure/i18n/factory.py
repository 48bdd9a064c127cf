"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with the
configured localization directory.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.i18n.loader import (
    FileTranslationLoader,
    JSONTranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_loader(
    translations_dir: Path,
    use_cache: bool = True,
) -> FileTranslationLoader:
    """Pick a loader for the files present in translations_dir.

    JSON dictionaries win when both formats are present.

    Raises:
        ValueError: If translations_dir does not exist.
    """
    translations_dir = Path(translations_dir)
    if translations_dir.is_dir() and not any(translations_dir.glob("*.json")):
        if any(translations_dir.glob("*.yml")) or any(translations_dir.glob("*.yaml")):
            return YAMLTranslationLoader(translations_dir, use_cache=use_cache)
    return JSONTranslationLoader(translations_dir, use_cache=use_cache)


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_language: Optional[str] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Directory of translation files (default: the
            configured build LOCALIZATION_DIR)
        fallback_language: Language used when a key is missing (default:
            the configured DEFAULT_LANGUAGE)
        use_cache: Whether the loader caches parsed files (default: True)
        preload: Whether to load all languages immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        translator = create_translator()

        translator = create_translator(translations_dir=Path("site/localization"))
    """
    if translations_dir is None or fallback_language is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()
        if translations_dir is None:
            translations_dir = settings.build.resolve(settings.build.LOCALIZATION_DIR)
        if fallback_language is None:
            fallback_language = settings.languages.DEFAULT_LANGUAGE

    loader = create_loader(translations_dir, use_cache=use_cache)
    translator = Translator(loader=loader, fallback_language=fallback_language)

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            language_count=len(translator.get_available_languages()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator
