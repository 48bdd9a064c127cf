"""Article page template."""

import html
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, Comment

from modules.content.errors import ContentBuildError

ARTICLE_CONTENT_MARKER = "ARTICLE_CONTENT"


def render_article_body(title: str, date: str, read_time: str, body_html: str) -> str:
    """Header and content block placed into the template."""
    meta = " · ".join(part for part in (date, read_time) if part)
    return (
        '<div class="article-header">'
        f'<h1 class="article-title">{html.escape(title)}</h1>'
        f'<div class="article-meta">{html.escape(meta)}</div>'
        "</div>"
        f'<article class="article-content">{body_html}</article>'
    )


class ArticleTemplate:
    """Shared page every article is rendered into.

    The template marks where article content goes with an
    ``<!-- ARTICLE_CONTENT -->`` comment.
    """

    def __init__(self, markup: str, source: Optional[str] = None):
        self.markup = markup
        self.source = source
        if self._find_marker(BeautifulSoup(markup, "html.parser")) is None:
            raise ContentBuildError(
                f"Template has no <!-- {ARTICLE_CONTENT_MARKER} --> marker",
                source=source,
            )

    @classmethod
    def from_file(cls, path: Path) -> "ArticleTemplate":
        try:
            markup = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ContentBuildError(f"Cannot read template: {e}", source=str(path)) from e
        return cls(markup, source=str(path))

    @staticmethod
    def _find_marker(soup: BeautifulSoup):
        return soup.find(
            string=lambda s: isinstance(s, Comment) and s.strip() == ARTICLE_CONTENT_MARKER
        )

    def render(
        self,
        content_html: str,
        page_title: str,
        description: Optional[str] = None,
    ) -> str:
        """Fill the template.

        Args:
            content_html: Markup replacing the marker comment.
            page_title: Text of the <title> element.
            description: When given, replaces the description and
                og:description meta contents.
        """
        soup = BeautifulSoup(self.markup, "html.parser")

        marker = self._find_marker(soup)
        for node in list(BeautifulSoup(content_html, "html.parser").contents):
            marker.insert_before(node.extract())
        marker.extract()

        if soup.title is not None:
            soup.title.string = page_title

        if description:
            for selector in ('meta[name="description"]', 'meta[property="og:description"]'):
                meta = soup.select_one(selector)
                if meta is not None:
                    meta["content"] = description

        return str(soup)
