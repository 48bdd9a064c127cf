"""Factory functions for wiring a transition controller to a window."""

from typing import Optional

import httpx

from infrastructure.configuration import Settings
from infrastructure.i18n.models import LanguagePair
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.logging import get_module_logger
from modules.navigation.browser import BrowserWindow
from modules.navigation.controller import TransitionController
from modules.navigation.fades import FadeOrchestrator
from modules.navigation.fetching import PageFetcher
from modules.navigation.links import LinkClassifier

logger = get_module_logger()


def create_language_resolver(
    window: BrowserWindow, settings: Optional[Settings] = None
) -> LanguageResolver:
    """Build a resolver reading the window's storage and locale list."""
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    languages = settings.languages
    return LanguageResolver(
        languages=LanguagePair(
            default=languages.DEFAULT_LANGUAGE,
            alternate=languages.ALTERNATE_LANGUAGE,
        ),
        storage=window.local_storage,
        navigator_languages=window.navigator_languages,
        storage_key=languages.PREFERENCE_STORAGE_KEY,
    )


def create_transition_controller(
    window: BrowserWindow,
    client: httpx.AsyncClient,
    settings: Optional[Settings] = None,
    resolver: Optional[LanguageResolver] = None,
) -> TransitionController:
    """Create the one transition controller of a loaded page.

    Args:
        window: Window holding the live document.
        client: HTTP client used for same-origin page fetches.
        settings: Settings to read tunables from (default: application settings).
        resolver: Pre-built language resolver (default: built from settings).

    Returns:
        TransitionController, not yet attached to the window.
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    transitions = settings.transitions
    resolver = resolver or create_language_resolver(window, settings)

    return TransitionController(
        window=window,
        resolver=resolver,
        fetcher=PageFetcher(client, content_selector=transitions.CONTENT_SELECTOR),
        fades=FadeOrchestrator(
            window,
            selector=transitions.FADE_SELECTOR,
            duration_seconds=transitions.fade_duration_seconds,
        ),
        links=LinkClassifier(
            resolver.languages, article_prefix=transitions.ARTICLE_PATH_PREFIX
        ),
        content_selector=transitions.CONTENT_SELECTOR,
    )


def boot_page(
    window: BrowserWindow,
    client: httpx.AsyncClient,
    settings: Optional[Settings] = None,
) -> Optional[TransitionController]:
    """Run the page-load sequence.

    First sends a bare language segment to the localized root; if that
    caused a full load, there is no page to attach to. Otherwise creates
    and attaches the transition controller.

    Returns:
        The attached controller, or None if the page was replaced.
    """
    resolver = create_language_resolver(window, settings)
    if resolver.redirect_if_language_segment_redundant(window.location):
        return None

    controller = create_transition_controller(
        window, client, settings=settings, resolver=resolver
    )
    controller.attach()
    logger.info(
        "page_booted",
        path=window.location.pathname,
        view=controller.current_view.value,
    )
    return controller
