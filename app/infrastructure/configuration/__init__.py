"""Infrastructure configuration module - public API.

This module provides centralized configuration management for Folio
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    BuildSettings, LanguageSettings, TransitionSettings, SiteSettings,
    PreviewSettings: Section classes

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    fade_ms = settings.transitions.TRANSITION_FADE_DURATION_MS
    articles = settings.build.resolve(settings.build.ARTICLES_DIR)
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import (
    BuildSettings,
    LanguageSettings,
    SiteSettings,
    TransitionSettings,
)
from infrastructure.configuration.infrastructure import PreviewSettings

__all__ = [
    "Settings",
    "BuildSettings",
    "LanguageSettings",
    "SiteSettings",
    "TransitionSettings",
    "PreviewSettings",
]
