"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.site import SiteSettings
from infrastructure.configuration.features.build import BuildSettings
from infrastructure.configuration.features.languages import LanguageSettings
from infrastructure.configuration.features.transitions import TransitionSettings

__all__ = [
    "SiteSettings",
    "BuildSettings",
    "LanguageSettings",
    "TransitionSettings",
]
