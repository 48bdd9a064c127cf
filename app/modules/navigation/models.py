"""Navigation data model.

Views, navigation requests, fetched page fragments and the history state
the transition controller writes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class View(str, Enum):
    """Logical page currently mounted."""

    HOME = "home"
    ARTICLE = "article"


class NavigationOutcome(str, Enum):
    """How a navigate() call ended."""

    COMPLETED = "completed"
    DROPPED = "dropped"
    FELL_BACK = "fell_back"


@dataclass(frozen=True)
class NavigationRequest:
    """One navigation intent, consumed immediately.

    Attributes:
        path: Target path (also the visible URL).
        view: View the target page mounts.
        push_history: False when the history already moved (popstate).
    """

    path: str
    view: View
    push_history: bool = True


@dataclass(frozen=True)
class PageFragment:
    """Parts of a fetched document spliced into the live one.

    Attributes:
        main_content: Outer markup of the content region.
        title: Text of the <title> element, if any.
        description: Content of the description meta tag, if any.
    """

    main_content: str
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class HistoryState:
    """State object attached to every history entry the controller pushes."""

    view: View
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"view": self.view.value, "path": self.path}


@dataclass(frozen=True)
class ControllerState:
    """Snapshot of the controller state machine: view x idle/transitioning."""

    view: View
    transitioning: bool = False

    @property
    def name(self) -> str:
        phase = "transitioning" if self.transitioning else "idle"
        return f"{self.view.value}:{phase}"
