"""Preview server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class PreviewSettings(InfrastructureSettings):
    """Local preview server configuration.

    Environment Variables:
        PREVIEW_HOST: Interface to bind (default: 127.0.0.1)
        PREVIEW_PORT: Port to listen on (default: 4173)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        uvicorn.run(app, host=settings.preview.PREVIEW_HOST, port=settings.preview.PREVIEW_PORT)
        ```
    """

    PREVIEW_HOST: str = Field(default="127.0.0.1", alias="PREVIEW_HOST")
    PREVIEW_PORT: int = Field(default=4173, alias="PREVIEW_PORT")
