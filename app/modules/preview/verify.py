"""Walks a built site with the transition controller.

Every article of the index is opened in-page from a freshly loaded home
page, then history goes back home; finally the language is toggled.
Any transition that falls back to a full page load is reported.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import httpx

from infrastructure.configuration import Settings
from infrastructure.i18n.models import LanguagePair
from infrastructure.logging import bind_log_context, get_module_logger
from modules.navigation import (
    BrowserWindow,
    NavigationOutcome,
    PageDocument,
    TransitionController,
    View,
    boot_page,
)
from modules.navigation.document import get_style_property
from modules.preview.server import create_preview_app

logger = get_module_logger()

BASE_URL = "http://folio.preview"


@dataclass
class VerificationReport:
    checked: List[str] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def record(self, path: str, problem: str = "") -> None:
        self.checked.append(path)
        if problem:
            self.failures.append((path, problem))
            logger.warning("verification_failed", path=path, problem=problem)


def _read_index(site_root: Path) -> List[dict]:
    index_path = site_root / "articles" / "index.json"
    if not index_path.is_file():
        logger.warning("article_index_missing", path=str(index_path))
        return []
    return json.loads(index_path.read_text(encoding="utf-8"))


def _faded_in(controller: TransitionController) -> bool:
    elements = controller.window.document.select(controller.fades.selector)
    return all(get_style_property(e, "opacity") == "1" for e in elements)


async def verify_site(site_root: Path, settings: Settings) -> VerificationReport:
    """Drive in-page navigation across the site in site_root."""
    report = VerificationReport()
    site_root = Path(site_root)
    # Nobody watches the fades
    settings = settings.model_copy(
        update={
            "transitions": settings.transitions.model_copy(
                update={"TRANSITION_FADE_DURATION_MS": 0}
            )
        }
    )

    languages = LanguagePair(
        default=settings.languages.DEFAULT_LANGUAGE,
        alternate=settings.languages.ALTERNATE_LANGUAGE,
    )
    transport = httpx.ASGITransport(app=create_preview_app(site_root, languages))
    async with httpx.AsyncClient(
        transport=transport, base_url=BASE_URL, timeout=None
    ) as client:
        with bind_log_context(site_root=str(site_root)):
            home = await client.get("/")
            if not home.is_success:
                report.record("/", f"home page answered {home.status_code}")
                return report

            def load_home() -> Optional[TransitionController]:
                window = BrowserWindow(
                    PageDocument(home.text),
                    url="/",
                    navigator_languages=[settings.languages.DEFAULT_LANGUAGE],
                )
                return boot_page(window, client, settings)

            if load_home() is None:
                report.record("/", "home page redirected on load")
                return report

            for entry in _read_index(site_root):
                url = entry["url"]
                controller = load_home()
                outcome = await controller.navigate(url, View.ARTICLE)
                if outcome is not NavigationOutcome.COMPLETED:
                    report.record(url, f"navigation {outcome.value}")
                    continue
                if not _faded_in(controller):
                    report.record(url, "content did not fade back in")
                    continue
                await controller.window.history.back()
                if controller.current_view is not View.HOME:
                    report.record(url, "back navigation did not restore home")
                    continue
                report.record(url)

            alternate = settings.languages.ALTERNATE_LANGUAGE
            if (site_root / alternate / "index.html").is_file():
                outcome = await load_home().toggle_language()
                problem = (
                    "" if outcome is NavigationOutcome.COMPLETED
                    else f"language toggle {outcome.value}"
                )
                report.record(f"/{alternate}/", problem)

    logger.info(
        "verification_finished",
        checked=len(report.checked),
        failures=len(report.failures),
    )
    return report
