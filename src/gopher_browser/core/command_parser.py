"""Command parser for interpreting user input."""

from abc import ABC
from dataclasses import dataclass

from .item import DEFAULT_PORT


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class ActivateCommand(Command):
    """Command to follow an item by number (None = highlighted item)."""

    index: int | None = None


@dataclass(frozen=True)
class SelectCommand(Command):
    """Command to move the highlight to an item by number."""

    index: int


@dataclass(frozen=True)
class StepCommand(Command):
    """Command to move the highlight to the next (1) or previous (-1) selectable item."""

    direction: int


@dataclass(frozen=True)
class ScrollCommand(Command):
    """Command to scroll by whole screens (negative = up)."""

    screens: int


@dataclass(frozen=True)
class BackCommand(Command):
    """Command to go back in history."""

    pass


@dataclass(frozen=True)
class BookmarksCommand(Command):
    """Command to list bookmarks, or open one by number."""

    index: int | None = None


@dataclass(frozen=True)
class GoCommand(Command):
    """Command to open a host/selector/port directly."""

    host: str
    selector: str = ""
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class HelpCommand(Command):
    """Command to display help information."""

    pass


@dataclass(frozen=True)
class QuitCommand(Command):
    """Command to exit the browser."""

    pass


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Represents an invalid or unrecognized command."""

    original_input: str
    reason: str = "Unknown command"


class CommandParser:
    """Parses user input strings into Command objects."""

    # Command mappings
    BACK_COMMANDS = {"b", "back"}
    NEXT_COMMANDS = {"n", "next"}
    PREVIOUS_COMMANDS = {"p", "prev"}
    STEP_DOWN_COMMANDS = {"j", "down"}
    STEP_UP_COMMANDS = {"k", "up"}
    SELECT_COMMANDS = {"s", "select"}
    BOOKMARK_COMMANDS = {"m", "bookmarks"}
    GO_COMMANDS = {"g", "go"}
    HELP_COMMANDS = {"?", "help"}
    QUIT_COMMANDS = {"q", "quit"}

    def parse(self, input_str: str) -> Command:
        """
        Parse a user input string into a Command object.

        Command words are case-insensitive; hosts and selectors given
        to 'g' keep their case.

        Args:
            input_str: The raw input string from the user.

        Returns:
            A Command object representing the parsed input.
        """
        tokens = input_str.split()

        # Enter alone follows the highlighted item
        if not tokens:
            return ActivateCommand()

        word = tokens[0].lower()
        args = tokens[1:]

        if word in self.GO_COMMANDS:
            return self._parse_go(input_str, args)

        if word in self.SELECT_COMMANDS:
            if len(args) != 1:
                return InvalidCommand(original_input=input_str, reason="Usage: s <number>")
            return self._parse_number(input_str, args[0], SelectCommand)

        if word in self.BOOKMARK_COMMANDS:
            if not args:
                return BookmarksCommand()
            return self._parse_number(input_str, args[0], BookmarksCommand)

        if args:
            return InvalidCommand(original_input=input_str, reason="Unexpected arguments")

        if word in self.BACK_COMMANDS:
            return BackCommand()

        if word in self.STEP_DOWN_COMMANDS:
            return StepCommand(direction=1)

        if word in self.STEP_UP_COMMANDS:
            return StepCommand(direction=-1)

        if word in self.NEXT_COMMANDS:
            return ScrollCommand(screens=1)

        if word in self.PREVIOUS_COMMANDS:
            return ScrollCommand(screens=-1)

        if word in self.HELP_COMMANDS:
            return HelpCommand()

        if word in self.QUIT_COMMANDS:
            return QuitCommand()

        # Try to parse as number
        try:
            int(word)
        except ValueError:
            return InvalidCommand(original_input=input_str, reason="Unknown command")
        return self._parse_number(input_str, word, ActivateCommand)

    def _parse_number(self, input_str: str, value: str, command_type: type) -> Command:
        try:
            number = int(value)
        except ValueError:
            return InvalidCommand(original_input=input_str, reason=f"Not a number: {value}")

        if number < 1:
            return InvalidCommand(
                original_input=input_str,
                reason="Selection must be positive",
            )
        return command_type(index=number)

    def _parse_go(self, input_str: str, args: list[str]) -> Command:
        if not args or len(args) > 3:
            return InvalidCommand(original_input=input_str, reason="Usage: g <host> [selector] [port]")

        host = args[0]
        selector = args[1] if len(args) > 1 else ""
        port = DEFAULT_PORT

        if len(args) > 2:
            try:
                port = int(args[2])
            except ValueError:
                return InvalidCommand(original_input=input_str, reason=f"Invalid port: {args[2]}")
            if port < 1 or port > 65535:
                return InvalidCommand(original_input=input_str, reason=f"Invalid port: {args[2]}")

        return GoCommand(host=host, selector=selector, port=port)
