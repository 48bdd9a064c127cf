"""Preview server for a built site.

Serves the output directory with the site's clean URLs: ``/`` and
``/<lang>/`` map to index pages, ``/articles/<slug>`` to the emitted
``articles/<slug>.html``. Pages missing under the alternate language
segment fall back to their unprefixed file.
"""

from pathlib import Path
from typing import Iterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse, Response

from infrastructure.i18n.models import LanguagePair
from infrastructure.logging import get_module_logger
from infrastructure.services import LanguagePairDep

logger = get_module_logger()


def _candidates(url_path: str) -> Iterator[str]:
    relative = url_path.lstrip("/")
    if relative == "" or relative.endswith("/"):
        yield relative + "index.html"
        return
    yield relative
    yield relative + ".html"
    yield relative + "/index.html"


def resolve_site_file(
    site_root: Path, url_path: str, languages: LanguagePair
) -> Optional[Path]:
    """Map a request path to a file below site_root, or None."""
    site_root = Path(site_root).resolve()
    paths = [url_path]
    prefix = languages.prefix
    if url_path == prefix or url_path.startswith(prefix + "/"):
        paths.append(url_path[len(prefix):] or "/")

    for path in paths:
        for candidate in _candidates(path):
            target = (site_root / candidate).resolve()
            if not target.is_relative_to(site_root):
                logger.warning("path_outside_site_root", path=url_path)
                return None
            if target.is_file():
                return target
    return None


def create_preview_app(
    site_root: Path, languages: Optional[LanguagePair] = None
) -> FastAPI:
    """Create the preview application for the site in site_root.

    Args:
        site_root: Built site directory.
        languages: Language pair of the site (default: the configured pair).
    """
    handler = FastAPI(title="Folio preview", docs_url=None, redoc_url=None)
    handler.state.site_root = Path(site_root).resolve()
    handler.state.languages = languages

    @handler.get("/{path:path}")
    def serve_page(path: str, request: Request, languages: LanguagePairDep) -> Response:
        target = resolve_site_file(request.app.state.site_root, f"/{path}", languages)
        if target is None:
            logger.info("preview_not_found", path=f"/{path}")
            return HTMLResponse("<h1>Not Found</h1>", status_code=404)
        return FileResponse(target)

    return handler
