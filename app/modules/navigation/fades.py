"""Cross-fade phases around a content swap."""

from modules.navigation.browser import BrowserWindow
from modules.navigation.document import PageDocument


class FadeOrchestrator:
    """Fades the transition-tagged elements out and back in.

    Both phases take the same duration so the swap does not stutter.
    """

    def __init__(
        self,
        window: BrowserWindow,
        selector: str = ".page-fade",
        duration_seconds: float = 0.3,
    ):
        self.window = window
        self.selector = selector
        self.duration_seconds = duration_seconds

    async def fade_out(self) -> None:
        """Hide the elements, wait, then jump to the top of the page."""
        PageDocument.set_opacity(self.window.document.select(self.selector), "0")
        await self.window.sleep(self.duration_seconds)
        self.window.scroll_to(top=0, left=0, behavior="instant")

    async def fade_in(self) -> None:
        """Reveal the (possibly new) elements on the next animation frame."""
        elements = self.window.document.select(self.selector)
        PageDocument.set_opacity(elements, "0")
        self.window.request_animation_frame(
            lambda: PageDocument.set_opacity(elements, "1")
        )
        await self.window.sleep(self.duration_seconds)
