"""Configuration handling for the Gopher Browser."""

from dataclasses import dataclass
from pathlib import Path
import yaml

from .core.item import Item, DEFAULT_PORT, MENU_KIND


@dataclass(frozen=True)
class Bookmark:
    """A preset destination shown in the bookmarks menu."""

    label: str
    host: str
    selector: str = ""
    port: int = DEFAULT_PORT
    kind: str = MENU_KIND

    def to_item(self) -> Item:
        """Convert to an item so it can be followed like a menu link."""
        return Item(
            kind=self.kind,
            display=self.label,
            selector=self.selector,
            host=self.host,
            port=self.port,
        )


DEFAULT_BOOKMARKS = (
    Bookmark(label="Floodgap Gopher", host="gopher.floodgap.com", selector="/"),
    Bookmark(label="SDF Public Access", host="sdf.org", selector="/"),
    Bookmark(label="Gopherpedia", host="gopherpedia.com", selector="/"),
    Bookmark(label="Veronica-2 Search", host="gopher.floodgap.com", selector="/v2/vs", kind="7"),
)


@dataclass
class Config:
    """Configuration settings for the Gopher browser.

    Attributes:
        start_host: Host loaded at startup.
        start_selector: Selector loaded at startup.
        start_port: Port loaded at startup.
        timeout_seconds: Socket read/write timeout.
        max_response_bytes: Responses longer than this are truncated.
        history_size: Maximum back-history entries.
        encoding: Encoding used to decode responses.
        follow_unknown_as_menu: Fetch unrecognized item kinds as menus.
        page_lines: Items shown per screen.
        bookmarks: Bookmark list.
    """

    start_host: str = "gopher.floodgap.com"
    start_selector: str = "/"
    start_port: int = DEFAULT_PORT
    timeout_seconds: float = 15
    max_response_bytes: int = 512 * 1024
    history_size: int = 50
    encoding: str = "utf-8"
    follow_unknown_as_menu: bool = True
    page_lines: int = 20
    bookmarks: tuple[Bookmark, ...] = DEFAULT_BOOKMARKS


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If a section is not a mapping, or a bookmark entry
                    is malformed or missing its label or host.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping")

    # Extract sections
    start = _section(data, "start")
    network = _section(data, "network")
    history = _section(data, "history")
    navigation = _section(data, "navigation")
    display = _section(data, "display")

    if "bookmarks" in data:
        entries = data["bookmarks"] or []
        if not isinstance(entries, list):
            raise ValueError("bookmarks must be a list")
        bookmarks = tuple(_load_bookmark(entry) for entry in entries)
    else:
        bookmarks = Config.bookmarks

    return Config(
        start_host=start.get("host", Config.start_host),
        start_selector=start.get("selector", Config.start_selector),
        start_port=start.get("port", Config.start_port),
        timeout_seconds=network.get("timeout_seconds", Config.timeout_seconds),
        max_response_bytes=network.get("max_response_bytes", Config.max_response_bytes),
        history_size=history.get("max_entries", Config.history_size),
        encoding=network.get("encoding", Config.encoding),
        follow_unknown_as_menu=navigation.get("follow_unknown_as_menu", Config.follow_unknown_as_menu),
        page_lines=display.get("page_lines", Config.page_lines),
        bookmarks=bookmarks,
    )


def _section(data: dict, name: str) -> dict:
    """Get a config section; an empty (null) section counts as absent."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def _load_bookmark(entry: dict) -> Bookmark:
    if not isinstance(entry, dict):
        raise ValueError(f"Bookmark must be a mapping: {entry!r}")
    if "label" not in entry or "host" not in entry:
        raise ValueError(f"Bookmark needs a label and host: {entry}")

    return Bookmark(
        label=entry["label"],
        host=entry["host"],
        selector=entry.get("selector", ""),
        port=entry.get("port", DEFAULT_PORT),
        kind=str(entry.get("kind", MENU_KIND)),
    )
