"""Site identity settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SiteSettings(FeatureSettings):
    """Identity of the site, used when composing page metadata.

    Environment Variables:
        SITE_NAME: Name appended to article page titles
        SITE_DESCRIPTION: Default description shipped in the page template

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        title = f"{article.title} - {settings.site.SITE_NAME}"
        ```
    """

    SITE_NAME: str = Field(default="Evan Lajusticia", alias="SITE_NAME")
    SITE_DESCRIPTION: str = Field(
        default="Evan Lajusticia - Portfolio - Développeur web créatif",
        alias="SITE_DESCRIPTION",
    )
