"""Navigation state owned by the NavigationController."""

from dataclasses import dataclass, field
from enum import Enum

from ..interfaces import TransportError
from .history import History
from .item import Item, Page


class NavigationPhase(Enum):
    """Where the controller is in a load cycle."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class PendingSearch:
    """A search item waiting for its query string."""

    item: Item


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a navigate or go_back call.

    Attributes:
        success: True if a page was fetched and parsed.
        selection: Index of the first selectable item on the new page,
            or None if it has none (or the load failed).
        truncated: True if the response hit the transport's size cap.
        error: The transport error if the fetch failed.
    """

    success: bool
    selection: int | None = None
    truncated: bool = False
    error: TransportError | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class NavigationState:
    """Process-lifetime browsing state."""

    page: Page = field(default_factory=Page)
    history: History = field(default_factory=History)
    pending_search: PendingSearch | None = None
    phase: NavigationPhase = NavigationPhase.IDLE
    status: str = ""
