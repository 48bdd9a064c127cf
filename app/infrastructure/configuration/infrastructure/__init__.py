"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.preview import PreviewSettings

__all__ = [
    "PreviewSettings",
]
