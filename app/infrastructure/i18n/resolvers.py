"""Language resolution and path localization.

Decides which language variant of the site a visitor gets and rewrites
language-agnostic paths into language-specific ones.
"""

from typing import Optional, Protocol, Sequence

import structlog
from infrastructure.i18n.models import LanguagePair, LanguagePreference
from infrastructure.i18n.storage import PreferenceStorage, StorageUnavailableError

logger = structlog.get_logger().bind(component="i18n.resolver")


class ReplaceableLocation(Protocol):
    """The part of a browser location the resolver needs."""

    @property
    def pathname(self) -> str: ...

    def replace(self, url: str) -> None: ...


class LanguageResolver:
    """Resolves the visitor's language and localizes paths.

    Resolution order:
    1. Explicit choice in durable storage
    2. Browser-reported locale list (primary subtag match on the alternate code)
    3. Default language
    """

    def __init__(
        self,
        languages: LanguagePair,
        storage: PreferenceStorage,
        navigator_languages: Sequence[str] = (),
        storage_key: str = "lang",
    ):
        """Initialize language resolver.

        Args:
            languages: Default/alternate language codes.
            storage: Durable storage holding the explicit choice.
            navigator_languages: Browser locale list in preference order.
            storage_key: Key of the explicit choice in storage.
        """
        self.languages = languages
        self.storage = storage
        self.navigator_languages = navigator_languages
        self.storage_key = storage_key
        self.log = logger.bind(
            default_language=languages.default,
            alternate_language=languages.alternate,
        )

    def _stored_preference(self) -> Optional[LanguagePreference]:
        try:
            stored = self.storage.get_item(self.storage_key)
        except StorageUnavailableError as e:
            self.log.warning("preference_storage_unavailable", error=str(e))
            return None
        preference = self.languages.preference_for(stored)
        if stored and preference is None:
            self.log.warning("unknown_stored_language", stored=stored)
        return preference

    def resolve_preference(self) -> LanguagePreference:
        """Resolve the active language preference. Pure read."""
        stored = self._stored_preference()
        if stored is not None:
            return stored

        for tag in self.navigator_languages or ():
            if tag and LanguageNegotiator.matches_language(
                tag, self.languages.alternate
            ):
                return LanguagePreference.ALTERNATE

        return LanguagePreference.DEFAULT

    def store_preference(self, preference: LanguagePreference) -> None:
        """Persist an explicit choice. Storage failures are logged and ignored."""
        code = self.languages.code_for(preference)
        try:
            self.storage.set_item(self.storage_key, code)
        except StorageUnavailableError as e:
            self.log.warning("preference_not_stored", language=code, error=str(e))
            return
        self.log.info("preference_stored", language=code)

    def has_prefix(self, path: str) -> bool:
        """True if path already lives under the alternate language segment."""
        prefix = self.languages.prefix
        return path == prefix or path.startswith(prefix + "/")

    def add_prefix(self, path: str) -> str:
        """Put path under the alternate language segment, once."""
        if self.has_prefix(path):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self.languages.prefix + path

    def strip_prefix(self, path: str) -> str:
        """Remove the alternate language segment, if present."""
        if not self.has_prefix(path):
            return path
        return path[len(self.languages.prefix):] or "/"

    def toggle_path(self, path: str) -> str:
        """Same logical page under the opposite language."""
        if self.has_prefix(path):
            return self.strip_prefix(path)
        return self.add_prefix(path)

    def localize(self, path: str) -> str:
        """Localize path for the current preference.

        Idempotent: an already prefixed path is returned unchanged.
        """
        if self.resolve_preference() is LanguagePreference.DEFAULT:
            return path
        return self.add_prefix(path)

    def redirect_if_language_segment_redundant(
        self, location: ReplaceableLocation
    ) -> bool:
        """Send a load of a bare language segment to the localized root.

        Only replaces the current history entry, and only when the target
        differs from the current path.

        Returns:
            True if a replace navigation was issued.
        """
        segments = location.pathname.split("/")
        segment = segments[1] if len(segments) > 1 else ""
        if segment not in self.languages.reserved_segments:
            return False

        target = self.localize("/")
        if location.pathname == target:
            return False

        self.log.info(
            "redirecting_redundant_language_segment",
            path=location.pathname,
            target=target,
        )
        location.replace(target)
        return True


class LanguageNegotiator:
    """Language tag matching helpers.

    Implements RFC 4647 style range matching for simple scenarios
    (e.g., when the browser reports "en-GB" and the site offers "en").
    """

    @staticmethod
    def matches_language(requested: str, available: str) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").

        Returns:
            True if the tags are equal or share their primary subtag.
        """
        if requested.lower() == available.lower():
            return True

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang
