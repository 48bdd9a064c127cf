"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LanguagePairDep,
    get_app_language_pair,
)
from infrastructure.services.providers import (
    get_settings,
    get_language_pair,
)

__all__ = [
    "LanguagePairDep",
    "get_app_language_pair",
    "get_settings",
    "get_language_pair",
]
