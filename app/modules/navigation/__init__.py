"""In-page navigation between the home view and article pages.

Main components:
- controller: TransitionController state machine
- browser: headless window, session history, location, events
- document: BeautifulSoup-backed live/fetched documents
- fetching: PageFetcher over httpx and fragment extraction
- fades: FadeOrchestrator
- links: LinkClassifier
- factory: create_transition_controller, boot_page
"""

from modules.navigation.browser import BrowserWindow, ClickEvent, FullNavigation
from modules.navigation.controller import TransitionController
from modules.navigation.document import PageDocument
from modules.navigation.errors import (
    MalformedPageError,
    NavigationError,
    PageFetchError,
)
from modules.navigation.factory import (
    boot_page,
    create_language_resolver,
    create_transition_controller,
)
from modules.navigation.fetching import PageFetcher, extract_fragment
from modules.navigation.models import (
    ControllerState,
    HistoryState,
    NavigationOutcome,
    NavigationRequest,
    PageFragment,
    View,
)

__all__ = [
    "BrowserWindow",
    "ClickEvent",
    "FullNavigation",
    "TransitionController",
    "PageDocument",
    "NavigationError",
    "PageFetchError",
    "MalformedPageError",
    "boot_page",
    "create_language_resolver",
    "create_transition_controller",
    "PageFetcher",
    "extract_fragment",
    "ControllerState",
    "HistoryState",
    "NavigationOutcome",
    "NavigationRequest",
    "PageFragment",
    "View",
]
