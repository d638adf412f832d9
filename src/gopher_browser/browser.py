"""GopherBrowser - Terminal front end for the navigation controller."""

import logging
from typing import Callable

from pubsub import pub

from .config import Config
from .core import (
    CommandParser,
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
    Item,
    Page,
    PageRenderer,
    NavigationController,
    NavigationResult,
    Followed,
    SearchRequested,
    Ignored,
    Unsupported,
    STATUS_TOPIC,
    NOTICE_TOPIC,
    PAGE_TOPIC,
)

logger = logging.getLogger(__name__)


class GopherBrowser:
    """Reads commands, drives the controller and prints pages.

    Plays the renderer, input dispatcher and text-entry roles for the
    controller. Pages, status and notices arrive via pubsub; scroll
    offset and highlight are kept here since they are display state.
    """

    PROMPT = "gopher> "

    HELP_TEXT = """Gopher Browser Help:
[num]      - Follow item
<enter>    - Follow highlighted item
s [num]    - Highlight item
j / k      - Highlight next / previous item
n / p      - Next / previous screen
b          - Back
m [num]    - Bookmarks (open by number)
g host [selector] [port] - Go to
q          - Quit
?          - This help"""

    def __init__(
        self,
        controller: NavigationController,
        config: Config | None = None,
        output: Callable[[str], None] = print,
        prompt: Callable[[str], str] = input,
    ):
        """
        Initialize the browser.

        Args:
            controller: Navigation controller to drive.
            config: Browser configuration (uses defaults if None).
            output: Called with each block of text to show.
            prompt: Called with a prompt string, returns a line of input.
        """
        self.controller = controller
        self.config = config or Config()
        self.output = output
        self.prompt = prompt

        self.parser = CommandParser()
        self.renderer = PageRenderer()

        self.offset = 0
        self.selection: int | None = None
        self._subscribed = False

    def start(self) -> None:
        """Subscribe to controller events and load the start page."""
        pub.subscribe(self._on_status, STATUS_TOPIC)
        pub.subscribe(self._on_notice, NOTICE_TOPIC)
        pub.subscribe(self._on_page, PAGE_TOPIC)
        self._subscribed = True

        config = self.config
        result = self.controller.navigate(config.start_host, config.start_selector, config.start_port)
        failure = self._report_failure(result)
        if failure:
            self.output(failure)

    def stop(self) -> None:
        """Unsubscribe from controller events."""
        if not self._subscribed:
            return

        pub.unsubscribe(self._on_status, STATUS_TOPIC)
        pub.unsubscribe(self._on_notice, NOTICE_TOPIC)
        pub.unsubscribe(self._on_page, PAGE_TOPIC)
        self._subscribed = False

    def run(self) -> None:
        """Read and handle commands until quit or end of input."""
        while True:
            try:
                line = self.prompt(self.PROMPT)
            except EOFError:
                break

            if not self.handle_input(line):
                break

    def handle_input(self, line: str) -> bool:
        """
        Handle one line of input.

        Args:
            line: The raw input line.

        Returns:
            False if the user asked to quit, True otherwise.
        """
        command = self.parser.parse(line)
        logger.debug(f"Command: {command.__class__.__name__}")

        if isinstance(command, QuitCommand):
            return False

        try:
            response = self._process_command(command)
        except Exception as e:
            logger.error(f"Error handling {line!r}: {e}")
            response = f"Error: {e}"

        if response:
            self.output(response)
        return True

    def _process_command(self, command) -> str | None:
        """
        Process a command.

        Pages loaded as a side effect are shown by the page listener,
        so only other output is returned.

        Args:
            command: The parsed command.

        Returns:
            Text to show, or None.
        """
        if isinstance(command, HelpCommand):
            return self.HELP_TEXT

        if isinstance(command, InvalidCommand):
            return f"{command.reason}: {command.original_input.strip()}\nType ? for help"

        if isinstance(command, BackCommand):
            return self._report_failure(self.controller.go_back())

        if isinstance(command, ActivateCommand):
            return self._handle_activate(command.index)

        if isinstance(command, SelectCommand):
            return self._handle_select(command.index)

        if isinstance(command, StepCommand):
            return self._handle_step(command.direction)

        if isinstance(command, ScrollCommand):
            return self._handle_scroll(command.screens)

        if isinstance(command, BookmarksCommand):
            return self._handle_bookmarks(command.index)

        if isinstance(command, GoCommand):
            result = self.controller.navigate(command.host, command.selector, command.port)
            return self._report_failure(result)

        return "Unknown command type"

    def _handle_activate(self, number: int | None) -> str | None:
        page = self.controller.get_current_page()

        if number is None:
            if self.selection is None:
                return "Nothing selected"
            item = page.item_at(self.selection)
        else:
            item = page.item_at(number - 1)

        if item is None:
            return f"Invalid selection: {number}"

        return self._follow(item)

    def _handle_select(self, number: int) -> str:
        page = self.controller.get_current_page()
        item = page.item_at(number - 1)

        if item is None or not item.selectable:
            return f"Not selectable: {number}"

        self.selection = number - 1
        # Keep the highlighted item on screen
        if not self.offset <= self.selection < self.offset + self.config.page_lines:
            self.offset = self.selection
        return self._render(page)

    def _handle_step(self, direction: int) -> str:
        """Move the highlight to the next selectable item, wrapping at the ends."""
        page = self.controller.get_current_page()
        selectable = [index for index, item in enumerate(page.items) if item.selectable]

        if not selectable:
            return "No selectable items"

        current = self.selection
        if direction > 0:
            following = [index for index in selectable if current is None or index > current]
            wrapped = not following
            target = following[0] if following else selectable[0]
        else:
            preceding = [index for index in selectable if current is None or index < current]
            wrapped = not preceding
            target = preceding[-1] if preceding else selectable[-1]

        self.selection = target
        lines = self.config.page_lines

        if wrapped and direction > 0:
            self.offset = 0
        elif target < self.offset:
            self.offset = target
        elif target >= self.offset + lines:
            self.offset = target - lines + 1

        return self._render(page)

    def _handle_scroll(self, screens: int) -> str:
        page = self.controller.get_current_page()
        last_offset = max(0, len(page.items) - self.config.page_lines)
        self.offset = max(0, min(self.offset + screens * self.config.page_lines, last_offset))
        return self._render(page)

    def _handle_bookmarks(self, number: int | None) -> str | None:
        bookmarks = self.config.bookmarks

        if number is None:
            return self.renderer.render_bookmarks(bookmarks)

        if number > len(bookmarks):
            return f"Invalid bookmark: {number}"

        bookmark = bookmarks[number - 1]
        logger.info(f"Opening bookmark: {bookmark.label}")
        return self._follow(bookmark.to_item())

    def _follow(self, item: Item) -> str | None:
        outcome = self.controller.follow_selected(item)

        if isinstance(outcome, Ignored):
            return f"Not selectable: {item.display}"

        if isinstance(outcome, Unsupported):
            return f"Cannot display item type '{outcome.kind}': {item.display}"

        if isinstance(outcome, SearchRequested):
            return self._run_search(item)

        if isinstance(outcome, Followed):
            return self._report_failure(outcome.result)

        return None

    def _run_search(self, item: Item) -> str | None:
        try:
            query = self.prompt(f"Search {item.display}: ")
        except EOFError:
            query = ""

        result = self.controller.complete_search(query.strip())
        if result is None:
            return "Search cancelled"
        return self._report_failure(result)

    def _report_failure(self, result: NavigationResult) -> str | None:
        if result.error is not None:
            return f"Error: {result.error}"
        return None

    def _render(self, page: Page) -> str:
        return self.renderer.render(
            page,
            offset=self.offset,
            max_lines=self.config.page_lines,
            selection=self.selection,
        )

    def _on_page(self, page: Page, selection: int | None) -> None:
        self.offset = 0
        self.selection = selection
        self.output(self._render(page))

    def _on_status(self, message: str) -> None:
        if message:
            self.output(message)

    def _on_notice(self, message: str) -> None:
        self.output(message)
