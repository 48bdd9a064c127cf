"""Build pipeline data model."""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


def normalize_date(value: Any) -> str:
    """Render a frontmatter date as YYYY-MM-DD, or pass strings through."""
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value) if value is not None else ""


def parse_date(value: str) -> Optional[dt.date]:
    """Parse a normalized date, None when it is empty or not a date."""
    if not value:
        return None
    try:
        return dt.datetime.fromisoformat(value).date()
    except ValueError:
        return None


@dataclass
class Article:
    """One markdown article after rendering.

    Attributes:
        slug: File name without extension; also the URL segment.
        title: Frontmatter title, or the slug.
        description: Frontmatter description, or "".
        date: Normalized publication date, or "".
        tags: Frontmatter tags.
        read_time: Read time label (e.g., "3 min de lecture").
        body_html: Rendered, highlighted article markup.
        page_html: Complete page built from the template.
    """

    slug: str
    title: str
    description: str = ""
    date: str = ""
    tags: List[str] = field(default_factory=list)
    read_time: str = ""
    body_html: str = ""
    page_html: str = ""

    @property
    def published(self) -> Optional[dt.date]:
        return parse_date(self.date)

    def url(self, article_prefix: str = "/articles/") -> str:
        return f"{article_prefix}{self.slug}"

    def to_index_entry(self, article_prefix: str = "/articles/") -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "readTime": self.read_time,
            "url": self.url(article_prefix),
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class EmittedAsset:
    """A named file of the build output.

    Attributes:
        file_name: Output-relative POSIX path (e.g., "articles/post.html").
        source: Text or byte content.
    """

    file_name: str
    source: Union[str, bytes]

    @property
    def content(self) -> bytes:
        if isinstance(self.source, bytes):
            return self.source
        return self.source.encode("utf-8")
