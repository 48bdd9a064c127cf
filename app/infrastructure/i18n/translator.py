"""Translation service for retrieving and interpolating translated messages."""

import re
from typing import Any, Dict, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey

logger = get_module_logger()


class Translator:
    """Service for translating messages with variable interpolation.

    Manages catalogs for multiple languages and provides translate_message()
    with support for variable substitution, plus lookup() for callers that
    leave untranslated content untouched instead of failing.

    Attributes:
        loader: TranslationLoader for loading translation files.
        catalogs: Cache of loaded TranslationCatalogs by language code.
        fallback_language: Language to use when key not found.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_language: Optional[str] = None,
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            fallback_language: Language to use when a key is not found.
        """
        self.loader = loader
        self.fallback_language = fallback_language
        self.catalogs: Dict[str, TranslationCatalog] = {}
        logger.info("initialized_translator", fallback_language=fallback_language)

    def load_all(self) -> None:
        """Load all available languages from loader."""
        self.catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", language_count=len(self.catalogs))

    def lookup(self, key: TranslationKey, language: str) -> Optional[str]:
        """Return the raw message for key in language, without fallback.

        Empty messages count as missing.
        """
        catalog = self.catalogs.get(language)
        message = catalog.get_message(key) if catalog else None
        return message or None

    def translate_message(
        self,
        key: TranslationKey,
        language: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Performs variable substitution using {{variable_name}} syntax.
        Falls back to fallback_language if key not found in requested language.

        Args:
            key: TranslationKey identifying the message.
            language: Language to translate to.
            variables: Optional dict of variables for interpolation.

        Returns:
            Translated and interpolated message string.

        Raises:
            KeyError: If key not found in requested or fallback language.
        """
        variables = variables or {}

        message = self.lookup(key, language)

        if not message and self.fallback_language and language != self.fallback_language:
            message = self.lookup(key, self.fallback_language)
            if message:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_language=language,
                    fallback_language=self.fallback_language,
                )

        if not message:
            logger.warning(
                "translation_not_found",
                key=str(key),
                language=language,
                fallback_language=self.fallback_language,
            )
            raise KeyError(
                f"Translation not found for key {key} in {language} or fallback {self.fallback_language}"
            )

        return self._interpolate(message, variables)

    def has_message(self, key: TranslationKey, language: str) -> bool:
        """Check if translation exists for key in language."""
        return self.lookup(key, language) is not None

    def get_available_languages(self) -> List[str]:
        """Get list of loaded language codes."""
        return list(self.catalogs.keys())

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace {{variable_name}} and {variable_name} with values.

        Raises:
            ValueError: If a placeholder has no value in variables.
        """
        double_pattern = r"\{\{(\w+)\}\}"
        single_pattern = r"\{(\w+)\}"

        double_matches = re.findall(double_pattern, message)
        single_matches = re.findall(single_pattern, message)

        for var_name in dict.fromkeys(double_matches + single_matches):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double-brace placeholders first so their inner braces are not seen twice
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))

        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message
