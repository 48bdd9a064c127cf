"""Page transition settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class TransitionSettings(FeatureSettings):
    """Tunables for in-page navigation.

    Environment Variables:
        TRANSITION_FADE_DURATION_MS: Duration of each fade phase (default: 300)
        CONTENT_SELECTOR: CSS selector of the swapped content region (default: main)
        FADE_SELECTOR: CSS selector of the elements that fade (default: .page-fade)
        ARTICLE_PATH_PREFIX: Path prefix of article pages (default: /articles/)
    """

    TRANSITION_FADE_DURATION_MS: int = Field(
        default=300, alias="TRANSITION_FADE_DURATION_MS", ge=0
    )
    CONTENT_SELECTOR: str = Field(default="main", alias="CONTENT_SELECTOR")
    FADE_SELECTOR: str = Field(default=".page-fade", alias="FADE_SELECTOR")
    ARTICLE_PATH_PREFIX: str = Field(
        default="/articles/", alias="ARTICLE_PATH_PREFIX"
    )

    @property
    def fade_duration_seconds(self) -> float:
        return self.TRANSITION_FADE_DURATION_MS / 1000
