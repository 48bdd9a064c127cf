"""Build pipeline errors."""

from typing import Optional


class ContentBuildError(Exception):
    """A problem that stops the site build.

    Attributes:
        source: File the problem was found in, if any.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message if source is None else f"{source}: {message}")
        self.source = source
