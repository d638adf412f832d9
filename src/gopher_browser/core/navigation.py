"""NavigationController - current page, back-history and pending search."""

import logging

from pubsub import pub

from ..interfaces import GopherTransport, TransportError, EmptyResponseError
from .gopher_parser import parse_menu, parse_text
from .history import History
from .item import HistoryEntry, Item, Page, DEFAULT_PORT, MENU_KIND, is_text_kind
from .link_dispatcher import LinkDispatcher, LinkOutcome
from .state import NavigationPhase, NavigationResult, NavigationState, PendingSearch

logger = logging.getLogger(__name__)

# pubsub topics
STATUS_TOPIC = "gopher.status"
NOTICE_TOPIC = "gopher.notice"
PAGE_TOPIC = "gopher.page"


class NavigationController:
    """Owns the navigation state and runs every command against it.

    Each command runs to completion before returning: a fetch blocks
    for at most the transport's timeout and the phase is never left
    at LOADING. Renderers follow along through pubsub:

        gopher.status (message)        - status line changes
        gopher.notice (message)        - one-off informational notices
        gopher.page   (page, selection) - a new page was loaded

    A failed load leaves the current page and history untouched; only
    status and phase change.
    """

    CONNECTING_STATUS = "Connecting..."
    LOADING_STATUS = "Loading..."
    FAILED_STATUS = "Failed to load page"
    NO_HISTORY_NOTICE = "No more history"
    TRUNCATED_NOTICE = "Response truncated"

    def __init__(
        self,
        transport: GopherTransport,
        history_size: int = History.DEFAULT_MAX_ENTRIES,
        encoding: str = "utf-8",
        follow_unknown_as_menu: bool = True,
    ):
        """
        Initialize the controller.

        Args:
            transport: Transport used for every fetch.
            history_size: Capacity of the back-history.
            encoding: Encoding used to decode responses.
            follow_unknown_as_menu: Fetch unrecognized item kinds as menus.
        """
        self.transport = transport
        self.encoding = encoding
        self.state = NavigationState(history=History(history_size))
        self.dispatcher = LinkDispatcher(self, follow_unknown_as_menu=follow_unknown_as_menu)

    @property
    def status(self) -> str:
        return self.state.status

    @property
    def phase(self) -> NavigationPhase:
        return self.state.phase

    @property
    def pending_search(self) -> PendingSearch | None:
        return self.state.pending_search

    def get_current_page(self) -> Page:
        """Get the current page (immutable snapshot)."""
        return self.state.page

    def get_history_depth(self) -> int:
        """Get the number of entries in the back-history."""
        return len(self.state.history)

    def navigate(
        self,
        host: str,
        selector: str = "",
        port: int = DEFAULT_PORT,
        kind: str = MENU_KIND,
    ) -> NavigationResult:
        """
        Fetch a resource and make it the current page.

        On success the previous page (if any) is pushed onto history.

        Args:
            host: Server host.
            selector: Selector to request.
            port: Server port.
            kind: Expected item kind; text kinds are parsed as text,
                  anything else as a menu.

        Returns:
            NavigationResult with the initial selection.
        """
        target = HistoryEntry(host=host, selector=selector, port=port, kind=kind)
        logger.info(f"Navigating to {target}")
        return self._load(target, self.CONNECTING_STATUS, record_history=True)

    def go_back(self) -> NavigationResult:
        """
        Reload the most recent history entry.

        Going back is never itself recorded in history. If the reload
        fails, the entry is put back so the user can try again.

        Returns:
            NavigationResult; unsuccessful if history was empty.
        """
        entry = self.state.history.pop()
        if entry is None:
            logger.debug("Back requested with empty history")
            self._notify(self.NO_HISTORY_NOTICE)
            return NavigationResult(success=False)

        logger.info(f"Going back to {entry}")
        result = self._load(entry, self.LOADING_STATUS, record_history=False)

        if not result.success:
            self.state.history.push(entry)

        return result

    def follow_selected(self, item: Item) -> LinkOutcome:
        """Follow an item via the link dispatcher."""
        return self.dispatcher.dispatch(item)

    def begin_search(self, item: Item) -> PendingSearch:
        """
        Record a search item as waiting for a query.

        Replaces any search that is already pending.
        """
        if self.state.pending_search is not None:
            logger.debug(f"Replacing pending search: {self.state.pending_search.item.display}")

        pending = PendingSearch(item=item)
        self.state.pending_search = pending
        logger.info(f"Search pending: {item.display}")
        return pending

    def complete_search(self, query: str) -> NavigationResult | None:
        """
        Run the pending search with a query string.

        An empty query cancels the search without fetching.

        Args:
            query: Text from the user.

        Returns:
            NavigationResult of the search, or None if there was no
            pending search or it was cancelled.
        """
        pending = self.state.pending_search
        if pending is None:
            logger.debug("No pending search to complete")
            return None

        self.state.pending_search = None

        if not query:
            logger.info("Search cancelled")
            return None

        item = pending.item
        selector = f"{item.selector}\t{query}"
        return self.navigate(item.host, selector, item.port, MENU_KIND)

    def close(self) -> None:
        """Clear all state at shutdown."""
        logger.debug("Clearing navigation state")
        self.state.history.clear()
        self.state.page = Page()
        self.state.pending_search = None
        self.state.phase = NavigationPhase.IDLE
        self.state.status = ""

    def _load(self, target: HistoryEntry, status: str, record_history: bool) -> NavigationResult:
        """Fetch and parse target, replacing the current page on success."""
        self.state.phase = NavigationPhase.LOADING
        self._set_status(status)

        try:
            fetched = self.transport.fetch(target.host, target.selector, target.port)
            if not fetched.data:
                raise EmptyResponseError(f"Empty response from {target.host}:{target.port}")
        except TransportError as e:
            logger.warning(f"Failed to load {target}: {e}")
            self.state.phase = NavigationPhase.FAILED
            self._set_status(self.FAILED_STATUS)
            return NavigationResult(success=False, error=e)

        page = self._build_page(target, fetched.data)

        previous = self.state.page
        if record_history and previous.is_loaded():
            self.state.history.push(previous.identity())

        self.state.page = page
        self.state.phase = NavigationPhase.LOADED
        self._set_status("")

        if fetched.truncated:
            logger.warning(f"Response from {target} was truncated")
            self._notify(self.TRUNCATED_NOTICE)

        selection = page.first_selectable()
        logger.info(f"Loaded {target}: {len(page.items)} items")
        pub.sendMessage(PAGE_TOPIC, page=page, selection=selection)

        return NavigationResult(success=True, selection=selection, truncated=fetched.truncated)

    def _build_page(self, target: HistoryEntry, data: bytes) -> Page:
        if is_text_kind(target.kind):
            document = parse_text(data, self.encoding)
            return Page(
                host=target.host,
                selector=target.selector,
                port=target.port,
                is_menu=False,
                items=document.items,
                raw_text=document.raw_text,
            )

        return Page(
            host=target.host,
            selector=target.selector,
            port=target.port,
            is_menu=True,
            items=parse_menu(data, self.encoding),
        )

    def _set_status(self, message: str) -> None:
        self.state.status = message
        pub.sendMessage(STATUS_TOPIC, message=message)

    def _notify(self, message: str) -> None:
        pub.sendMessage(NOTICE_TOPIC, message=message)
