"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.models import LanguagePair


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_language_pair() -> LanguagePair:
    """
    Get the application-scoped default/alternate language pair.

    Returns:
        LanguagePair: Built from settings.languages.
    """
    languages = get_settings().languages
    return LanguagePair(
        default=languages.DEFAULT_LANGUAGE,
        alternate=languages.ALTERNATE_LANGUAGE,
    )
