"""Language selection settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class LanguageSettings(FeatureSettings):
    """The two languages the site is published in.

    The default language is served without a path prefix; the alternate one
    lives under ``/<ALTERNATE_LANGUAGE>/``.

    Environment Variables:
        DEFAULT_LANGUAGE: Unprefixed language code (default: fr)
        ALTERNATE_LANGUAGE: Prefixed language code (default: en)
        PREFERENCE_STORAGE_KEY: Durable storage key for the visitor choice (default: lang)
    """

    DEFAULT_LANGUAGE: str = Field(default="fr", alias="DEFAULT_LANGUAGE")
    ALTERNATE_LANGUAGE: str = Field(default="en", alias="ALTERNATE_LANGUAGE")
    PREFERENCE_STORAGE_KEY: str = Field(default="lang", alias="PREFERENCE_STORAGE_KEY")

    @field_validator("DEFAULT_LANGUAGE", "ALTERNATE_LANGUAGE")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Language codes are compared on their lowercase primary subtag."""
        code = v.strip().lower()
        if not code or "/" in code:
            raise ValueError(f"Invalid language code: {v!r}")
        return code
