"""Recognizing the links and paths page transitions care about."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bs4 import Tag

from infrastructure.i18n.models import LanguagePair
from modules.navigation.browser import ClickEvent

LANGUAGE_TOGGLE_SELECTOR = "[data-lang-toggle]"
HOME_LINK_CLASS = "home-link"


class LinkKind(str, Enum):
    ARTICLE = "article"
    HOME = "home"
    LANGUAGE_TOGGLE = "language_toggle"


@dataclass(frozen=True)
class LinkTarget:
    kind: LinkKind
    element: Tag
    href: str


class LinkClassifier:
    """Classifies click targets and paths.

    Article links point under the article prefix, optionally behind the
    alternate language segment. Home links are ``a.home-link`` anchors
    whose href is one of the home-equivalent forms.
    """

    def __init__(self, languages: LanguagePair, article_prefix: str = "/articles/"):
        self.languages = languages
        self.article_prefix = "/" + article_prefix.strip("/") + "/"

    @property
    def article_prefixes(self) -> tuple:
        return (self.article_prefix, self.languages.prefix + self.article_prefix)

    @property
    def home_hrefs(self) -> tuple:
        prefix = self.languages.prefix
        return ("", "/", prefix, prefix + "/")

    @property
    def article_selector(self) -> str:
        return ", ".join(f'a[href^="{prefix}"]' for prefix in self.article_prefixes)

    @property
    def home_selector(self) -> str:
        return ", ".join(
            f'a.{HOME_LINK_CLASS}[href="{href}"]' for href in self.home_hrefs
        )

    def is_article_path(self, path: str) -> bool:
        return path.startswith(self.article_prefixes)

    def is_home_path(self, path: str) -> bool:
        return path in self.home_hrefs and path != ""

    def classify(self, event: ClickEvent) -> Optional[LinkTarget]:
        """Return what the click landed on, or None for foreign clicks.

        Clicks with a modifier key held are never claimed.
        """
        if event.has_modifier:
            return None

        for kind, selector in (
            (LinkKind.LANGUAGE_TOGGLE, LANGUAGE_TOGGLE_SELECTOR),
            (LinkKind.ARTICLE, self.article_selector),
            (LinkKind.HOME, self.home_selector),
        ):
            element = event.closest(selector)
            if element is not None:
                return LinkTarget(kind=kind, element=element, href=element.get("href", ""))
        return None
