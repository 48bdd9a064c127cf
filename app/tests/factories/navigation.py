"""Test data factories for page transition testing.

Provides deterministic builders for:
- Home and article page markup
- BrowserWindow instances
- httpx clients answering from an in-memory page table
"""

from typing import Dict, Optional, Sequence

import httpx

from infrastructure.i18n import MemoryStorage
from modules.navigation import BrowserWindow, PageDocument


def make_home_html(
    title: str = "Accueil",
    description: str = "Portfolio",
    articles: Sequence[str] = ("premier", "second"),
    lang_prefix: str = "",
) -> str:
    """Build a home page with one link per article slug."""
    links = "".join(
        f'<li><a class="article-link" href="{lang_prefix}/articles/{slug}">{slug}</a></li>'
        for slug in articles
    )
    return (
        "<html><head>"
        f"<title>{title}</title>"
        f'<meta name="description" content="{description}">'
        "</head><body>"
        '<nav><a class="home-link" href="/">Accueil</a>'
        '<button data-lang-toggle="">EN</button></nav>'
        f'<main class="page-fade"><h1>{title}</h1><ul>{links}</ul></main>'
        '<footer class="page-fade">pied</footer>'
        "</body></html>"
    )


def make_article_html(
    slug: str = "premier",
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> str:
    """Build an article page as the build pipeline would emit it."""
    title = title or f"Article {slug}"
    description = description if description is not None else f"About {slug}"
    return (
        "<html><head>"
        f"<title>{title} - Evan Lajusticia</title>"
        f'<meta name="description" content="{description}">'
        "</head><body>"
        '<nav><a class="home-link" href="/">Accueil</a>'
        '<button data-lang-toggle="">EN</button></nav>'
        f'<main class="page-fade"><article class="article-content">'
        f"<h1>{title}</h1><p>Body of {slug}</p></article></main>"
        "</body></html>"
    )


def make_site_pages(slugs: Sequence[str] = ("premier", "second")) -> Dict[str, str]:
    """Page table of a small site keyed by path."""
    pages = {"/": make_home_html(articles=slugs)}
    pages["/en/"] = make_home_html(title="Home", articles=slugs, lang_prefix="/en")
    pages["/en"] = pages["/en/"]
    for slug in slugs:
        pages[f"/articles/{slug}"] = make_article_html(slug)
        pages[f"/en/articles/{slug}"] = make_article_html(slug, title=f"Post {slug}")
    return pages


def make_client(
    pages: Optional[Dict[str, str]] = None,
    statuses: Optional[Dict[str, int]] = None,
    requests: Optional[list] = None,
) -> httpx.AsyncClient:
    """AsyncClient answering from a page table through httpx.MockTransport.

    Args:
        pages: Markup by path (default: make_site_pages()).
        statuses: Forced status codes by path.
        requests: When given, every requested path is appended to it.
    """
    pages = make_site_pages() if pages is None else pages
    statuses = statuses or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if requests is not None:
            requests.append(path)
        if path in statuses:
            return httpx.Response(statuses[path], text="error")
        if path not in pages:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=pages[path])

    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://folio.test"
    )


def make_window(
    url: str = "/",
    markup: Optional[str] = None,
    navigator_languages: Sequence[str] = ("fr-FR", "fr"),
    stored_language: Optional[str] = None,
) -> BrowserWindow:
    """BrowserWindow showing markup (default: the page table entry for url)."""
    if markup is None:
        markup = make_site_pages().get(url, make_home_html())
    storage = MemoryStorage({"lang": stored_language} if stored_language else None)
    return BrowserWindow(
        PageDocument(markup),
        url=url,
        navigator_languages=navigator_languages,
        local_storage=storage,
    )
