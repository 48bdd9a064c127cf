"""Live and fetched HTML documents.

A thin wrapper over BeautifulSoup exposing the handful of DOM operations
page transitions need: the content region, the title, the description
meta tag and inline opacity.
"""

from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag

DESCRIPTION_SELECTOR = 'meta[name="description"]'


def _parse_style(style: str) -> dict:
    declarations = {}
    for chunk in (style or "").split(";"):
        name, sep, value = chunk.partition(":")
        if sep and name.strip():
            declarations[name.strip().lower()] = value.strip()
    return declarations


def set_style_property(element: Tag, name: str, value: str) -> None:
    """Set one inline style declaration, keeping the others."""
    declarations = _parse_style(element.get("style", ""))
    declarations[name] = value
    element["style"] = "; ".join(f"{k}: {v}" for k, v in declarations.items())


def get_style_property(element: Tag, name: str) -> Optional[str]:
    return _parse_style(element.get("style", "")).get(name)


class PageDocument:
    """An HTML document held as a BeautifulSoup tree."""

    def __init__(self, markup: str = ""):
        self.soup = BeautifulSoup(markup, "html.parser")

    def __str__(self) -> str:
        return str(self.soup)

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    @property
    def title(self) -> Optional[str]:
        tag = self.soup.title
        return tag.get_text() if tag is not None else None

    @title.setter
    def title(self, value: str) -> None:
        tag = self.soup.title
        if tag is None:
            tag = self.soup.new_tag("title")
            head = self.soup.head
            if head is not None:
                head.append(tag)
            else:
                self.soup.insert(0, tag)
        tag.string = value

    @property
    def description(self) -> Optional[str]:
        meta = self.select_one(DESCRIPTION_SELECTOR)
        return meta.get("content") if meta is not None else None

    @description.setter
    def description(self, value: str) -> None:
        # Only an existing tag is updated
        meta = self.select_one(DESCRIPTION_SELECTOR)
        if meta is not None:
            meta["content"] = value

    def content_region(self, selector: str = "main") -> Optional[Tag]:
        return self.select_one(selector)

    def replace_content_region(self, markup: str, selector: str = "main") -> bool:
        """Swap the live content region for the given outer markup.

        Returns:
            False if the document has no content region to replace.
        """
        current = self.content_region(selector)
        if current is None:
            return False
        fragment = BeautifulSoup(markup, "html.parser")
        replacement = fragment.select_one(selector) or fragment.find(True)
        if replacement is None:
            return False
        current.replace_with(replacement.extract())
        return True

    @staticmethod
    def set_opacity(elements: Iterable[Tag], value: str) -> None:
        for element in elements:
            set_style_property(element, "opacity", value)
