"""Page renderer for terminal output."""

from .item import Item, ItemCategory, Page

# Suffixes hinting at what following an item does
CATEGORY_SUFFIXES = {
    ItemCategory.MENU: "/",
    ItemCategory.SEARCH: " <?>",
    ItemCategory.BINARY: " [bin]",
}


class PageRenderer:
    """Renders a window of a page as numbered lines."""

    def render(
        self,
        page: Page,
        offset: int = 0,
        max_lines: int | None = None,
        selection: int | None = None,
    ) -> str:
        """
        Render part of a page.

        Selectable items are numbered by their 1-based position in the
        page; info and error lines are indented to line up with them.

        Args:
            page: The page to render.
            offset: Index of the first item to show.
            max_lines: Maximum items to show (None for all).
            selection: Index of the highlighted item, if any.

        Returns:
            Formatted page string.
        """
        lines = [self.render_header(page)]

        if not page.items:
            lines.append("(empty)")
            return "\n".join(lines)

        total = len(page.items)
        offset = max(0, min(offset, total - 1))
        end = total if max_lines is None else min(total, offset + max_lines)

        width = len(str(total))
        for index in range(offset, end):
            lines.append(self.render_item(page.items[index], index, width, index == selection))

        # Add position indicator
        if offset > 0 or end < total:
            lines.append(f"-- {offset + 1}-{end} of {total} --")

        return "\n".join(lines)

    def render_header(self, page: Page) -> str:
        if not page.is_loaded():
            return "[no page]"
        return f"[{page.host}:{page.port} {page.selector}]"

    def render_item(self, item: Item, index: int, width: int, selected: bool = False) -> str:
        marker = ">" if selected else " "

        if not item.selectable:
            prefix = "!" if item.category is ItemCategory.ERROR else " "
            return f"{marker} {' ' * width}  {prefix}{item.display}".rstrip()

        suffix = CATEGORY_SUFFIXES.get(item.category, "")
        return f"{marker} {index + 1:>{width}}. {item.display}{suffix}"

    def render_bookmarks(self, bookmarks) -> str:
        """Render the bookmark list as a numbered menu."""
        if not bookmarks:
            return "(no bookmarks)"

        lines = ["[bookmarks]"]
        for i, bookmark in enumerate(bookmarks, 1):
            lines.append(f"{i}. {bookmark.label} ({bookmark.host}:{bookmark.port} {bookmark.selector})")
        lines.append("")
        lines.append("m <num> to open")
        return "\n".join(lines)
