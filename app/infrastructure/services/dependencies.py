"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.i18n.models import LanguagePair
from infrastructure.services.providers import get_language_pair


def get_app_language_pair(request: Request) -> LanguagePair:
    """Language pair the serving app was created with, else the configured one."""
    languages = getattr(request.app.state, "languages", None)
    return languages or get_language_pair()


# Default/alternate language pair dependency
LanguagePairDep = Annotated[LanguagePair, Depends(get_app_language_pair)]

__all__ = [
    "LanguagePairDep",
    "get_app_language_pair",
]
