"""Core components for the Gopher Browser."""

from .item import Item, ItemCategory, Page, HistoryEntry, DEFAULT_PORT
from .gopher_parser import parse_menu, parse_text, TextDocument
from .history import History
from .state import NavigationPhase, NavigationResult, NavigationState, PendingSearch
from .link_dispatcher import LinkDispatcher, LinkOutcome, Followed, SearchRequested, Ignored, Unsupported
from .navigation import NavigationController, STATUS_TOPIC, NOTICE_TOPIC, PAGE_TOPIC
from .command_parser import (
    CommandParser,
    Command,
    ActivateCommand,
    SelectCommand,
    StepCommand,
    ScrollCommand,
    BackCommand,
    BookmarksCommand,
    GoCommand,
    HelpCommand,
    QuitCommand,
    InvalidCommand,
)
from .page_renderer import PageRenderer

__all__ = [
    "Item",
    "ItemCategory",
    "Page",
    "HistoryEntry",
    "DEFAULT_PORT",
    "parse_menu",
    "parse_text",
    "TextDocument",
    "History",
    "NavigationPhase",
    "NavigationResult",
    "NavigationState",
    "PendingSearch",
    "LinkDispatcher",
    "LinkOutcome",
    "Followed",
    "SearchRequested",
    "Ignored",
    "Unsupported",
    "NavigationController",
    "STATUS_TOPIC",
    "NOTICE_TOPIC",
    "PAGE_TOPIC",
    "CommandParser",
    "Command",
    "ActivateCommand",
    "SelectCommand",
    "StepCommand",
    "ScrollCommand",
    "BackCommand",
    "BookmarksCommand",
    "GoCommand",
    "HelpCommand",
    "QuitCommand",
    "InvalidCommand",
    "PageRenderer",
]
