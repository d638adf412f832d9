"""Bounded back-history of visited pages."""

from collections import deque

from .item import HistoryEntry


class History:
    """Stack of previously visited pages with a fixed capacity.

    Pushing onto a full history evicts the oldest entry.
    """

    DEFAULT_MAX_ENTRIES = 50

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        """
        Initialize an empty history.

        Args:
            max_entries: Maximum number of entries kept.
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self._entries: deque[HistoryEntry] = deque(maxlen=max_entries)

    @property
    def max_entries(self) -> int:
        return self._entries.maxlen

    def push(self, entry: HistoryEntry) -> None:
        """Push an entry onto the history."""
        self._entries.append(entry)

    def pop(self) -> HistoryEntry | None:
        """Pop and return the most recent entry, or None if empty."""
        if self._entries:
            return self._entries.pop()
        return None

    def peek(self) -> HistoryEntry | None:
        """Return the most recent entry without removing it."""
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        """Clear all history."""
        self._entries.clear()

    def is_empty(self) -> bool:
        """Check if the history is empty."""
        return len(self._entries) == 0

    def entries(self) -> list[HistoryEntry]:
        """Get entries, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
