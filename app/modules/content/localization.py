"""Per-language copies of the home page.

Elements carrying ``data-i18n="dotted.key"`` get their content replaced
by the translation; elements carrying ``data-i18n-content="dotted.key"``
get their ``content`` attribute replaced. Keys without a translation are
left untouched.
"""

from typing import Callable, List, Optional

from bs4 import BeautifulSoup

from infrastructure.i18n.models import TranslationKey
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from modules.content.models import EmittedAsset

logger = get_module_logger()

TEXT_ATTRIBUTE = "data-i18n"
CONTENT_ATTRIBUTE = "data-i18n-content"

Lookup = Callable[[TranslationKey], Optional[str]]


def _key(value: str) -> Optional[TranslationKey]:
    try:
        return TranslationKey.from_string(value)
    except ValueError:
        logger.warning("invalid_translation_key", key=value)
        return None


def localize_html(markup: str, lookup: Lookup, language: str) -> str:
    """Substitute translations into markup for one language."""
    soup = BeautifulSoup(markup, "html.parser")

    if soup.html is not None:
        soup.html["lang"] = language

    missing = 0
    for element in soup.select(f"[{TEXT_ATTRIBUTE}]"):
        key = _key(element[TEXT_ATTRIBUTE])
        translation = lookup(key) if key else None
        if not translation:
            missing += 1
            continue
        element.clear()
        for node in list(BeautifulSoup(translation, "html.parser").contents):
            element.append(node.extract())

    for element in soup.select(f"[{CONTENT_ATTRIBUTE}]"):
        key = _key(element[CONTENT_ATTRIBUTE])
        translation = lookup(key) if key else None
        if not translation:
            missing += 1
            continue
        element["content"] = translation

    if missing:
        logger.info("untranslated_placeholders", language=language, count=missing)
    return str(soup)


class LocalizedPageBuilder:
    """Builds ``<language>/index.html`` for every loaded language."""

    def __init__(self, translator: Translator):
        self.translator = translator

    def build(self, home_html: str) -> List[EmittedAsset]:
        assets = []
        for language in sorted(self.translator.get_available_languages()):
            localized = localize_html(
                home_html,
                lambda key, language=language: self.translator.lookup(key, language),
                language,
            )
            assets.append(EmittedAsset(file_name=f"{language}/index.html", source=localized))
            logger.info("localized_page_built", language=language)
        return assets
