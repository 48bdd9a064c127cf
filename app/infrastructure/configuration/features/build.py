"""Build pipeline settings."""

from pathlib import Path

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class BuildSettings(FeatureSettings):
    """Locations and tunables for the static site build.

    Relative paths are resolved against SOURCE_DIR, except OUTPUT_DIR which
    is resolved against the current working directory.

    Environment Variables:
        SOURCE_DIR: Root of the site sources (default: current directory)
        ARTICLES_DIR: Directory of markdown articles (default: articles)
        TEMPLATE_PATH: Article page template (default: template.html)
        HOME_PAGE_PATH: Home page source (default: index.html)
        LOCALIZATION_DIR: Translation dictionaries (default: localization)
        STATIC_DIR: Static assets to fingerprint (default: static)
        OUTPUT_DIR: Build output directory (default: dist)
        EMPTY_OUT_DIR: Remove the output directory before writing (default: True)
        WORDS_PER_MINUTE: Reading speed used for read time (default: 220)
        READ_TIME_TEMPLATE: Fallback read time label (default: "{minutes} min de lecture")
    """

    SOURCE_DIR: Path = Field(default=Path("."), alias="SOURCE_DIR")
    ARTICLES_DIR: Path = Field(default=Path("articles"), alias="ARTICLES_DIR")
    TEMPLATE_PATH: Path = Field(default=Path("template.html"), alias="TEMPLATE_PATH")
    HOME_PAGE_PATH: Path = Field(default=Path("index.html"), alias="HOME_PAGE_PATH")
    LOCALIZATION_DIR: Path = Field(
        default=Path("localization"), alias="LOCALIZATION_DIR"
    )
    STATIC_DIR: Path = Field(default=Path("static"), alias="STATIC_DIR")
    OUTPUT_DIR: Path = Field(default=Path("dist"), alias="OUTPUT_DIR")
    EMPTY_OUT_DIR: bool = Field(default=True, alias="EMPTY_OUT_DIR")
    WORDS_PER_MINUTE: int = Field(default=220, alias="WORDS_PER_MINUTE", gt=0)
    READ_TIME_TEMPLATE: str = Field(
        default="{minutes} min de lecture", alias="READ_TIME_TEMPLATE"
    )

    def resolve(self, path: Path) -> Path:
        """Resolve a source-relative path against SOURCE_DIR."""
        return path if path.is_absolute() else self.SOURCE_DIR / path
