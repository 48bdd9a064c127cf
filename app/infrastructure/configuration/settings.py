"""Folio configuration settings - main aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Feature settings
from infrastructure.configuration.features import (
    SiteSettings,
    BuildSettings,
    LanguageSettings,
    TransitionSettings,
)

# Infrastructure settings
from infrastructure.configuration.infrastructure import PreviewSettings


class Settings(BaseSettings):
    """Folio configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Features**: site identity, build pipeline, languages, page transitions
    - **Infrastructure**: preview server

    Environment Variables:
        ENVIRONMENT: Deployment environment name (default: development)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        output_dir = settings.build.OUTPUT_DIR
        alternate = settings.languages.ALTERNATE_LANGUAGE

        if settings.is_production:
            # JSON logs...
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application-level settings
    ENVIRONMENT: str = Field(default="development", alias="ENVIRONMENT")
    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")

    # Feature settings
    site: SiteSettings
    build: BuildSettings
    languages: LanguageSettings
    transitions: TransitionSettings

    # Infrastructure settings
    preview: PreviewSettings

    @property
    def is_production(self) -> bool:
        """Check if the toolkit is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Features
            "site": SiteSettings,
            "build": BuildSettings,
            "languages": LanguageSettings,
            "transitions": TransitionSettings,
            # Infrastructure
            "preview": PreviewSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)
