"""Parsers for Gopher menus and text files.

Servers are untrusted and often non-conformant, so nothing here raises
on malformed input: missing fields become empty strings and bad ports
become the default port.

Undecodable bytes are kept as surrogate escapes in selectors and hosts,
so a selector encodes back to exactly the bytes the server sent. Display
text has them replaced with U+FFFD.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator

from .item import Item, DEFAULT_PORT, INFO_KIND

logger = logging.getLogger(__name__)

END_MARKER = "."
MAX_PORT = 65535

SURROGATE_ESCAPES = re.compile("[\udc80-\udcff]")


@dataclass(frozen=True)
class TextDocument:
    """A text file response: the body and one info item per line."""

    raw_text: str
    items: tuple[Item, ...] = field(default_factory=tuple)


def decode(data: bytes | str, encoding: str = "utf-8") -> str:
    """Decode response bytes, escaping undecodable bytes as surrogates."""
    if isinstance(data, str):
        return data
    return data.decode(encoding, errors="surrogateescape")


def printable(text: str) -> str:
    """Replace surrogate-escaped bytes with U+FFFD for display."""
    return SURROGATE_ESCAPES.sub("\ufffd", text)


def iter_lines(text: str) -> Iterator[str]:
    """
    Yield response lines up to the end marker.

    Lines are split on LF with a trailing CR removed. A lone "." ends
    the response. The empty segment after a final LF is not a line.
    """
    segments = text.split("\n")
    last = len(segments) - 1

    for position, segment in enumerate(segments):
        line = segment[:-1] if segment.endswith("\r") else segment

        if line == END_MARKER:
            return

        if position == last and not line:
            return

        yield line


def parse_port(value: str) -> int:
    """Parse a port field, falling back to the default port."""
    value = value.strip()
    if not value:
        return DEFAULT_PORT

    try:
        port = int(value)
    except ValueError:
        logger.debug(f"Non-numeric port {value!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT

    if port <= 0 or port > MAX_PORT:
        logger.debug(f"Port {port} out of range, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


def parse_menu_line(line: str) -> Item:
    """
    Parse a single menu line.

    Format: <type><display>TAB<selector>TAB<host>TAB<port>
    Only the type character is required.
    """
    if not line:
        return Item(kind=INFO_KIND)

    kind = line[0]
    fields = line[1:].split("\t")

    display = printable(fields[0]) if len(fields) > 0 else ""
    selector = fields[1] if len(fields) > 1 else ""
    host = fields[2] if len(fields) > 2 else ""
    port = parse_port(fields[3]) if len(fields) > 3 else DEFAULT_PORT

    return Item(kind=kind, display=display, selector=selector, host=host, port=port)


def parse_menu(data: bytes | str, encoding: str = "utf-8") -> list[Item]:
    """
    Parse a menu response into items.

    Empty lines are skipped. Never returns an empty list: a response
    with no lines yields a single blank info item.

    Args:
        data: Raw response bytes (or already decoded text).
        encoding: Encoding used to decode bytes.

    Returns:
        Items in source order.
    """
    items = [parse_menu_line(line) for line in iter_lines(decode(data, encoding)) if line]

    if not items:
        logger.debug("Menu response has no lines")
        return [Item(kind=INFO_KIND)]

    logger.debug(f"Parsed {len(items)} menu items")
    return items


def parse_text(data: bytes | str, encoding: str = "utf-8") -> TextDocument:
    """
    Parse a text file response.

    Every line, including empty ones, becomes an info item so the text
    can be shown in the same list as a menu.

    Args:
        data: Raw response bytes (or already decoded text).
        encoding: Encoding used to decode bytes.

    Returns:
        TextDocument with the decoded body and its display lines.
    """
    text = printable(decode(data, encoding))
    items = [Item(kind=INFO_KIND, display=line) for line in iter_lines(text)]

    if not items:
        items = [Item(kind=INFO_KIND)]

    return TextDocument(raw_text=text, items=tuple(items))
