"""Turning markdown articles into pages."""

from pathlib import Path
from typing import Callable, List, Optional

import frontmatter
import yaml

from infrastructure.logging import get_module_logger
from modules.content.errors import ContentBuildError
from modules.content.models import Article, normalize_date
from modules.content.rendering import (
    estimate_read_minutes,
    highlight_code_blocks,
    render_markdown,
)
from modules.content.templates import ArticleTemplate, render_article_body

logger = get_module_logger()

ReadTimeLabel = Callable[[int], str]


def default_read_time_label(minutes: int) -> str:
    return f"{minutes} min de lecture"


class ArticleProcessor:
    """Renders markdown files with frontmatter into article pages."""

    def __init__(
        self,
        template: ArticleTemplate,
        site_name: str,
        words_per_minute: int = 220,
        read_time_label: Optional[ReadTimeLabel] = None,
    ):
        self.template = template
        self.site_name = site_name
        self.words_per_minute = words_per_minute
        self.read_time_label = read_time_label or default_read_time_label

    def page_title(self, title: Optional[str]) -> str:
        return f"{title} - {self.site_name}" if title else self.site_name

    def process_text(self, slug: str, text: str) -> Article:
        """Render one article from its raw file content.

        Raises:
            ContentBuildError: If the frontmatter cannot be parsed.
        """
        try:
            post = frontmatter.loads(text)
        except yaml.YAMLError as e:
            raise ContentBuildError(f"Invalid frontmatter: {e}", source=slug) from e

        metadata = post.metadata
        title = str(metadata.get("title") or "")
        description = str(metadata.get("description") or "")
        tags = metadata.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]

        body_html = highlight_code_blocks(render_markdown(post.content))
        read_time = self.read_time_label(
            estimate_read_minutes(post.content, self.words_per_minute)
        )
        date = normalize_date(metadata.get("date"))

        article = Article(
            slug=slug,
            title=title or slug,
            description=description,
            date=date,
            tags=[str(tag) for tag in tags],
            read_time=read_time,
            body_html=body_html,
        )
        article.page_html = self.template.render(
            render_article_body(article.title, date, read_time, body_html),
            page_title=self.page_title(title),
            description=description or None,
        )
        return article

    def process_file(self, path: Path) -> Article:
        path = Path(path)
        logger.info("processing_article", file=path.name)
        article = self.process_text(path.stem, path.read_text(encoding="utf-8"))
        logger.info("article_processed", slug=article.slug)
        return article

    def process_directory(self, articles_dir: Path) -> List[Article]:
        """Render every ``*.md`` file of a directory, in name order."""
        files = sorted(Path(articles_dir).glob("*.md"))
        if not files:
            logger.warning("no_markdown_articles", articles_dir=str(articles_dir))
            return []

        logger.info("found_articles", count=len(files))
        return [self.process_file(path) for path in files]


def sort_newest_first(articles: List[Article]) -> List[Article]:
    """Order articles by date, newest first; undated articles last."""
    dated = [a for a in articles if a.published is not None]
    undated = [a for a in articles if a.published is None]
    dated.sort(key=lambda a: a.published, reverse=True)
    return dated + undated
