"""Translation and language models for the i18n system.

Defines core data structures for managing translations and the
default/alternate language pair the site is published in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class LanguagePreference(str, Enum):
    """Which of the two site languages a visitor gets.

    The default language is served unprefixed; the alternate one lives
    under its own path segment.
    """

    DEFAULT = "default"
    ALTERNATE = "alternate"


@dataclass(frozen=True)
class LanguagePair:
    """Concrete language codes behind a LanguagePreference.

    Attributes:
        default: Code of the unprefixed language (e.g., "fr").
        alternate: Code of the prefixed language (e.g., "en").
    """

    default: str = "fr"
    alternate: str = "en"

    def code_for(self, preference: LanguagePreference) -> str:
        """Return the language code for a preference."""
        if preference is LanguagePreference.ALTERNATE:
            return self.alternate
        return self.default

    def preference_for(self, code: Optional[str]) -> Optional[LanguagePreference]:
        """Map a stored language code back to a preference.

        Args:
            code: Language code (case-insensitive).

        Returns:
            Matching LanguagePreference, or None for unknown codes.
        """
        if not code:
            return None
        normalized = code.strip().lower()
        if normalized == self.alternate:
            return LanguagePreference.ALTERNATE
        if normalized == self.default:
            return LanguagePreference.DEFAULT
        return None

    @property
    def prefix(self) -> str:
        """Path prefix of the alternate language (e.g., "/en")."""
        return f"/{self.alternate}"

    @property
    def reserved_segments(self) -> Tuple[str, ...]:
        """First path segments that only restate the language choice.

        The empty string stands for the unprefixed default language.
        """
        return (self.alternate, "")


@dataclass(frozen=True)
class TranslationKey:
    """Represents a dotted translation key.

    Keys address a nested dictionary at any depth (e.g., "hero.title",
    "meta.og.description"). Frozen to ensure immutability and hashability.

    Attributes:
        parts: Path segments of the key.
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.parts)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "hero.title").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If the key is empty or has an empty segment.
        """
        parts = tuple(part.strip() for part in (key_string or "").split("."))
        if not all(parts):
            raise ValueError(f"Invalid translation key: {key_string!r}")
        return cls(parts=parts)


@dataclass
class TranslationCatalog:
    """Container for translations in a specific language.

    Attributes:
        language: Language code this catalog is for.
        messages: Nested dict structure addressed by TranslationKey parts.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    language: str
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Args:
            key: TranslationKey to look up.

        Returns:
            Translated message string, or None if missing or not a string.
        """
        current: Any = self.messages
        for part in key.parts:
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]
        return current if isinstance(current, str) else None

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones; nested dicts are merged.

        Args:
            other: TranslationCatalog to merge.
        """
        _deep_merge(self.messages, other.messages)


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _deep_merge(existing, value)
        else:
            target[key] = value
