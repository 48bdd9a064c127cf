"""Headless browser model.

Just enough of a browser window for page transitions to run outside a
real browser: a live document, session history with popstate, a
location supporting full navigations, durable storage, the navigator's
language list, scrolling, timers and animation frames. Events are
dispatched to listeners in registration order; listeners may return
awaitables, which are collected on the event.
"""

import asyncio
import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence
from urllib.parse import urlsplit

from bs4 import Tag

from infrastructure.i18n.storage import MemoryStorage, PreferenceStorage
from modules.navigation.document import PageDocument

Listener = Callable[[Any], Optional[Awaitable[Any]]]


@dataclass
class ClickEvent:
    """A click on an element of the live document."""

    target: Tag
    ctrl_key: bool = False
    meta_key: bool = False
    shift_key: bool = False
    default_prevented: bool = False
    pending: List[Awaitable[Any]] = field(default_factory=list)

    @property
    def has_modifier(self) -> bool:
        return self.ctrl_key or self.meta_key or self.shift_key

    def prevent_default(self) -> None:
        self.default_prevented = True

    def closest(self, selector: str) -> Optional[Tag]:
        """Nearest element, target included, matching selector."""
        return self.target.css.closest(selector)


@dataclass
class PopStateEvent:
    state: Optional[Dict[str, Any]] = None
    pending: List[Awaitable[Any]] = field(default_factory=list)


@dataclass
class HistoryEntry:
    url: str
    state: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class FullNavigation:
    """A page load that abandons all in-page state."""

    url: str
    replace: bool = False


class SessionHistory:
    """Session history stack with push/replace and traversal."""

    def __init__(self, window: "BrowserWindow", initial_url: str):
        self._window = window
        self.entries: List[HistoryEntry] = [HistoryEntry(url=initial_url)]
        self.index = 0

    @property
    def current(self) -> HistoryEntry:
        return self.entries[self.index]

    def push_state(self, state: Optional[Dict[str, Any]], url: str) -> None:
        """Add an entry after the current one, dropping forward entries."""
        del self.entries[self.index + 1:]
        self.entries.append(HistoryEntry(url=url, state=state))
        self.index += 1

    def replace_state(self, state: Optional[Dict[str, Any]], url: str) -> None:
        self.entries[self.index] = HistoryEntry(url=url, state=state)

    async def go(self, delta: int) -> bool:
        """Move through history and fire popstate.

        Returns:
            False if delta points outside the stack.
        """
        target = self.index + delta
        if delta == 0 or not 0 <= target < len(self.entries):
            return False
        self.index = target
        await self._window.dispatch_popstate(self.current.state)
        return True

    async def back(self) -> bool:
        return await self.go(-1)

    async def forward(self) -> bool:
        return await self.go(1)


class Location:
    """The window location, derived from the current history entry."""

    def __init__(self, window: "BrowserWindow"):
        self._window = window

    @property
    def href(self) -> str:
        return self._window.history.current.url

    @property
    def pathname(self) -> str:
        return urlsplit(self.href).path or "/"

    def assign(self, url: str) -> None:
        """Full navigation to url, adding a history entry.

        Navigating to the URL already shown replaces the entry instead.
        """
        if url == self.href:
            self.replace(url)
            return
        self._window.full_navigations.append(FullNavigation(url=url))
        self._window.history.push_state(None, url)

    def replace(self, url: str) -> None:
        """Full navigation to url, replacing the current history entry."""
        self._window.full_navigations.append(FullNavigation(url=url, replace=True))
        self._window.history.replace_state(None, url)


class BrowserWindow:
    """A single browser window holding one live document."""

    def __init__(
        self,
        document: PageDocument,
        url: str = "/",
        navigator_languages: Sequence[str] = ("fr-FR", "fr"),
        local_storage: Optional[PreferenceStorage] = None,
    ):
        self.document = document
        self.navigator_languages = list(navigator_languages)
        self.local_storage = local_storage or MemoryStorage()
        self.history = SessionHistory(self, url)
        self.location = Location(self)
        self.full_navigations: List[FullNavigation] = []
        self.scroll_position = (0, 0)
        self._listeners: Dict[str, List[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def _dispatch(self, event_type: str, event: Any) -> None:
        for listener in list(self._listeners.get(event_type, [])):
            result = listener(event)
            if inspect.isawaitable(result):
                event.pending.append(result)

    def click(
        self,
        target: Tag,
        ctrl_key: bool = False,
        meta_key: bool = False,
        shift_key: bool = False,
    ) -> ClickEvent:
        """Dispatch a click on target and return the event."""
        event = ClickEvent(
            target=target, ctrl_key=ctrl_key, meta_key=meta_key, shift_key=shift_key
        )
        self._dispatch("click", event)
        if not event.default_prevented and not event.has_modifier:
            href = target.css.closest("a[href]")
            if href is not None:
                self.location.assign(href["href"])
        return event

    async def dispatch_popstate(self, state: Optional[Dict[str, Any]]) -> PopStateEvent:
        """Fire popstate and wait for every listener to finish."""
        event = PopStateEvent(state=state)
        self._dispatch("popstate", event)
        if event.pending:
            await asyncio.gather(*event.pending)
        return event

    def scroll_to(self, top: int = 0, left: int = 0, behavior: str = "auto") -> None:
        self.scroll_position = (top, left)

    def request_animation_frame(self, callback: Callable[[], None]) -> None:
        """Run callback before the next paint, i.e. on the next loop turn."""
        asyncio.get_running_loop().call_soon(callback)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
