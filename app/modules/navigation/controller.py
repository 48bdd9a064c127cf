"""Page transition controller.

Replaces full page loads between the home view and article pages with
fetch + content swap + cross-fade, keeping session history and the
mounted view consistent.

The controller is a small state machine over (view) x (idle, transitioning).
Three named events feed it: a click on the live document, a popstate from
history traversal, and the language toggle. All of them end in
navigate(), which holds the transition lock for its whole run.
"""

import asyncio
from typing import Optional, Set

from infrastructure.i18n.models import LanguagePreference
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.logging import bind_log_context, get_module_logger
from modules.navigation.browser import BrowserWindow, ClickEvent, PopStateEvent
from modules.navigation.errors import MalformedPageError
from modules.navigation.fades import FadeOrchestrator
from modules.navigation.fetching import PageFetcher
from modules.navigation.links import LinkClassifier, LinkKind
from modules.navigation.models import (
    ControllerState,
    HistoryState,
    NavigationOutcome,
    NavigationRequest,
    PageFragment,
    View,
)

logger = get_module_logger()


class TransitionController:
    """Owns in-page navigation for one loaded page.

    Attributes:
        current_view: View currently mounted; changes only after a
            transition completes.
        current_path: Path of the mounted page.
        is_transitioning: The transition lock.
    """

    def __init__(
        self,
        window: BrowserWindow,
        resolver: LanguageResolver,
        fetcher: PageFetcher,
        fades: FadeOrchestrator,
        links: LinkClassifier,
        content_selector: str = "main",
    ):
        self.window = window
        self.resolver = resolver
        self.fetcher = fetcher
        self.fades = fades
        self.links = links
        self.content_selector = content_selector

        self.current_path = window.location.pathname
        self.current_view = (
            View.ARTICLE if links.is_article_path(self.current_path) else View.HOME
        )
        self.is_transitioning = False
        self._attached = False
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> ControllerState:
        return ControllerState(view=self.current_view, transitioning=self.is_transitioning)

    def attach(self) -> None:
        """Start listening for clicks and history traversal."""
        if self._attached:
            return
        self.window.add_event_listener("click", self.handle_click)
        self.window.add_event_listener("popstate", self.handle_popstate)
        self._attached = True

    async def navigate(
        self, path: str, view: View, push_history: bool = True
    ) -> NavigationOutcome:
        """Run one transition to path.

        User-triggered requests (push_history=True) arriving while a
        transition is in flight are dropped. Any failure after the lock is
        taken turns into a full page load of path. The lock is always
        released.
        """
        if push_history and self.is_transitioning:
            logger.debug(
                "navigation_dropped", path=path, view=view.value, state=self.state.name
            )
            return NavigationOutcome.DROPPED

        self.is_transitioning = True
        with bind_log_context(navigation_path=path, view=view.value):
            try:
                if push_history:
                    self.window.history.push_state(
                        HistoryState(view=view, path=path).to_dict(), path
                    )

                await self.fades.fade_out()
                fragment = await self.fetcher.fetch_fragment(path)
                self._switch_to(fragment)
                await self.fades.fade_in()

                self.current_view = view
                self.current_path = path
                logger.info("navigation_completed")
                return NavigationOutcome.COMPLETED
            except Exception as e:
                logger.error(
                    "navigation_failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                self.window.location.assign(path)
                return NavigationOutcome.FELL_BACK
            finally:
                self.is_transitioning = False

    async def submit(self, request: NavigationRequest) -> NavigationOutcome:
        """Run a navigation request produced by one of the events."""
        return await self.navigate(request.path, request.view, request.push_history)

    def _switch_to(self, fragment: PageFragment) -> None:
        document = self.window.document
        if document.content_region(self.content_selector) is None:
            raise MalformedPageError("Live document has no content region")

        if not document.replace_content_region(
            fragment.main_content, self.content_selector
        ):
            raise MalformedPageError("Fetched content region could not be spliced")

        if fragment.title:
            document.title = fragment.title
        if fragment.description:
            document.description = fragment.description

    def _schedule(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def handle_click(self, event: ClickEvent) -> Optional[asyncio.Task]:
        """Delegated click listener.

        Returns:
            The scheduled navigation task, or None if the click was not
            intercepted or needs no navigation.
        """
        target = self.links.classify(event)
        if target is None:
            return None

        event.prevent_default()

        if target.kind is LinkKind.ARTICLE:
            return self._schedule(
                self.submit(NavigationRequest(path=target.href, view=View.ARTICLE))
            )

        if target.kind is LinkKind.HOME:
            if self.current_view is View.HOME:
                return None
            home = NavigationRequest(path=self.resolver.localize("/"), view=View.HOME)
            return self._schedule(self.submit(home))

        return self._schedule(self.toggle_language())

    async def handle_popstate(
        self, event: Optional[PopStateEvent] = None
    ) -> Optional[NavigationOutcome]:
        """Reconcile the mounted page with a history traversal.

        Ignored while a transition is in flight. Paths that are neither
        home nor article are left to the browser.
        """
        if self.is_transitioning:
            logger.debug("popstate_ignored_during_transition")
            return None

        path = self.window.location.pathname
        if self.links.is_home_path(path):
            view = View.HOME
        elif self.links.is_article_path(path):
            view = View.ARTICLE
        else:
            return None

        if view is self.current_view and path == self.current_path:
            return None
        return await self.submit(
            NavigationRequest(path=path, view=view, push_history=False)
        )

    async def toggle_language(self) -> NavigationOutcome:
        """Show the current page in the other language.

        Stores the new choice, then navigates to the current path with the
        alternate language segment stripped if present, added otherwise.
        """
        if self.is_transitioning:
            return NavigationOutcome.DROPPED

        target = self.resolver.toggle_path(self.window.location.pathname)
        preference = (
            LanguagePreference.ALTERNATE
            if self.resolver.has_prefix(target)
            else LanguagePreference.DEFAULT
        )
        self.resolver.store_preference(preference)
        logger.info(
            "language_toggled",
            language=self.resolver.languages.code_for(preference),
            target=target,
        )
        return await self.navigate(target, self.current_view)
