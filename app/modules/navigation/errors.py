"""Navigation errors.

Every one of these is caught at the top of a navigation and turned into
a full page load.
"""

from typing import Optional


class NavigationError(Exception):
    """Base class for in-page navigation failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PageFetchError(NavigationError):
    """The target page answered with a non-success HTTP status."""

    def __init__(self, path: str, status_code: int):
        super().__init__(f"Failed to fetch page {path}: {status_code}", path=path)
        self.status_code = status_code


class MalformedPageError(NavigationError):
    """The fetched document has no content region."""
