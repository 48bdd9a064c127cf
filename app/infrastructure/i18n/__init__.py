"""i18n system - language resolution and translation dictionaries.

Provides translation loading, the default/alternate language model, path
localization and durable storage of the visitor's language choice.

Main components:
- models: LanguagePreference, LanguagePair, TranslationKey, TranslationCatalog
- loader: TranslationLoader, JSONTranslationLoader and YAMLTranslationLoader
- translator: Translator service with message interpolation
- resolvers: LanguageResolver and LanguageNegotiator
- storage: PreferenceStorage backends
"""

from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    LanguagePair,
    LanguagePreference,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LanguageNegotiator, LanguageResolver
from infrastructure.i18n.storage import (
    MemoryStorage,
    PreferenceStorage,
    StorageUnavailableError,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "LanguagePair",
    "LanguagePreference",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "JSONTranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LanguageResolver",
    "LanguageNegotiator",
    "PreferenceStorage",
    "MemoryStorage",
    "StorageUnavailableError",
]
