"""Decides what following a selected item does."""

import logging
from abc import ABC
from dataclasses import dataclass

from .item import Item, ItemCategory, MENU_KIND
from .state import NavigationResult

logger = logging.getLogger(__name__)


class LinkOutcome(ABC):
    """Base class for the result of following an item."""

    pass


@dataclass(frozen=True)
class Followed(LinkOutcome):
    """A fetch was attempted; result holds the NavigationResult."""

    result: NavigationResult


@dataclass(frozen=True)
class SearchRequested(LinkOutcome):
    """A search is pending and needs a query string."""

    item: Item


@dataclass(frozen=True)
class Ignored(LinkOutcome):
    """The item is not selectable."""

    item: Item


@dataclass(frozen=True)
class Unsupported(LinkOutcome):
    """The item kind cannot be displayed. No fetch was attempted."""

    kind: str


class LinkDispatcher:
    """Maps a selected item to a navigation controller operation."""

    def __init__(self, controller, follow_unknown_as_menu: bool = True):
        """
        Initialize the dispatcher.

        Args:
            controller: NavigationController whose operations are invoked.
            follow_unknown_as_menu: Fetch unrecognized kinds as menus
                instead of reporting them as unsupported.
        """
        self.controller = controller
        self.follow_unknown_as_menu = follow_unknown_as_menu

    def dispatch(self, item: Item) -> LinkOutcome:
        """
        Follow an item according to its kind.

        Args:
            item: The selected item.

        Returns:
            The outcome of following it.
        """
        if not item.selectable:
            logger.debug(f"Ignoring non-selectable item {item.kind!r}: {item.display}")
            return Ignored(item)

        category = item.category
        logger.debug(f"Following {category.value} item: {item.display}")

        if category is ItemCategory.MENU:
            return self._navigate(item, MENU_KIND)

        if category is ItemCategory.TEXT:
            return self._navigate(item, item.kind)

        if category is ItemCategory.SEARCH:
            self.controller.begin_search(item)
            return SearchRequested(item)

        if category is ItemCategory.BINARY:
            logger.info(f"Binary item type {item.kind!r} is not supported")
            return Unsupported(item.kind)

        if category is ItemCategory.UNKNOWN and self.follow_unknown_as_menu:
            return self._navigate(item, MENU_KIND)

        logger.info(f"Item type {item.kind!r} is not supported")
        return Unsupported(item.kind)

    def _navigate(self, item: Item, kind: str) -> Followed:
        return Followed(self.controller.navigate(item.host, item.selector, item.port, kind))
