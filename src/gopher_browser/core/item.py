"""Gopher items, pages and history entries."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_PORT = 70

MENU_KIND = "1"
TEXT_KIND = "0"
INFO_KIND = "i"


class ItemCategory(Enum):
    """How an item kind is handled when followed."""

    MENU = "menu"
    TEXT = "text"
    SEARCH = "search"
    INFO = "info"
    ERROR = "error"
    SERVICE = "service"  # CSO, telnet, tn3270, redundant server
    BINARY = "binary"
    UNKNOWN = "unknown"


# RFC 1436 type characters
KIND_CATEGORIES = {
    "1": ItemCategory.MENU,
    "0": ItemCategory.TEXT,
    "h": ItemCategory.TEXT,
    "7": ItemCategory.SEARCH,
    "i": ItemCategory.INFO,
    "3": ItemCategory.ERROR,
    "2": ItemCategory.SERVICE,
    "8": ItemCategory.SERVICE,
    "T": ItemCategory.SERVICE,
    "+": ItemCategory.SERVICE,
    "4": ItemCategory.BINARY,
    "5": ItemCategory.BINARY,
    "6": ItemCategory.BINARY,
    "9": ItemCategory.BINARY,
    "g": ItemCategory.BINARY,
    "I": ItemCategory.BINARY,
    "s": ItemCategory.BINARY,
}

NON_SELECTABLE_CATEGORIES = frozenset(
    {ItemCategory.INFO, ItemCategory.ERROR, ItemCategory.SERVICE}
)


def categorize(kind: str) -> ItemCategory:
    """Map a type character to its category."""
    return KIND_CATEGORIES.get(kind, ItemCategory.UNKNOWN)


def is_text_kind(kind: str) -> bool:
    """Check if a kind should be parsed as a text file."""
    return categorize(kind) is ItemCategory.TEXT


@dataclass(frozen=True)
class Item:
    """One menu line, or one display line of a text file."""

    kind: str
    display: str = ""
    selector: str = ""
    host: str = ""
    port: int = DEFAULT_PORT

    @property
    def category(self) -> ItemCategory:
        return categorize(self.kind)

    @property
    def selectable(self) -> bool:
        """Info, error and service items can never be followed."""
        return self.category not in NON_SELECTABLE_CATEGORIES


@dataclass(frozen=True)
class HistoryEntry:
    """Identity of a previously visited page (not its content)."""

    host: str
    selector: str
    port: int = DEFAULT_PORT
    kind: str = MENU_KIND

    def __str__(self) -> str:
        return f"{self.host}:{self.port} {self.selector!r}"


@dataclass(frozen=True)
class Page:
    """Result of the last successful fetch (immutable)."""

    host: str = ""
    selector: str = ""
    port: int = DEFAULT_PORT
    is_menu: bool = True
    items: tuple[Item, ...] = field(default_factory=tuple)
    raw_text: str = ""

    def __init__(
        self,
        host: str = "",
        selector: str = "",
        port: int = DEFAULT_PORT,
        is_menu: bool = True,
        items: list[Item] | tuple[Item, ...] | None = None,
        raw_text: str = "",
    ):
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "selector", selector)
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "is_menu", is_menu)
        # Convert list to tuple for immutability
        object.__setattr__(self, "items", tuple(items) if items else ())
        object.__setattr__(self, "raw_text", raw_text)

    def is_loaded(self) -> bool:
        """Check if this page came from a fetch."""
        return bool(self.host)

    def identity(self) -> HistoryEntry:
        """Snapshot of this page's identity for the history stack."""
        return HistoryEntry(
            host=self.host,
            selector=self.selector,
            port=self.port,
            kind=MENU_KIND if self.is_menu else TEXT_KIND,
        )

    def first_selectable(self) -> int | None:
        """Index of the first selectable item, or None if there is none."""
        for index, item in enumerate(self.items):
            if item.selectable:
                return index
        return None

    def item_at(self, index: int) -> Item | None:
        """
        Get item at 0-based index.

        Returns None if index is invalid.
        """
        if index < 0 or index >= len(self.items):
            return None
        return self.items[index]
