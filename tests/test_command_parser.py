"""Tests for the CommandParser module."""

import pytest
from gopher_browser.core.command_parser import (
    CommandParser,
    ActivateCommand,
    SelectCommand,
    ScrollCommand,
    StepCommand,
    BackCommand,
    BookmarksCommand,
    GoCommand,
    HelpCommand,
    QuitCommand,
    InvalidCommand,
)


class TestCommandParser:
    """Tests for CommandParser."""

    @pytest.fixture
    def parser(self):
        """Create a CommandParser instance."""
        return CommandParser()

    def test_parse_number(self, parser):
        """Parsing a number returns ActivateCommand."""
        cmd = parser.parse("2")
        assert cmd == ActivateCommand(index=2)

    def test_parse_large_number(self, parser):
        """Long pages can have large item numbers."""
        assert parser.parse("250") == ActivateCommand(index=250)

    def test_parse_number_with_whitespace(self, parser):
        """Parsing number with leading/trailing whitespace works."""
        assert parser.parse("  7  ") == ActivateCommand(index=7)

    def test_parse_empty_activates_highlight(self, parser):
        """Empty input follows the highlighted item."""
        assert parser.parse("") == ActivateCommand(index=None)
        assert parser.parse("   ") == ActivateCommand(index=None)

    def test_parse_zero_is_invalid(self, parser):
        """Zero is not a valid selection."""
        cmd = parser.parse("0")
        assert isinstance(cmd, InvalidCommand)

    def test_parse_negative_is_invalid(self, parser):
        """Negative numbers are invalid."""
        cmd = parser.parse("-5")
        assert isinstance(cmd, InvalidCommand)

    @pytest.mark.parametrize("text", ["b", "B", "back"])
    def test_parse_back(self, parser, text):
        """'b' and 'back' return BackCommand."""
        assert isinstance(parser.parse(text), BackCommand)

    @pytest.mark.parametrize("text", ["n", "next"])
    def test_parse_next(self, parser, text):
        """'n' scrolls down one screen."""
        assert parser.parse(text) == ScrollCommand(screens=1)

    @pytest.mark.parametrize("text", ["p", "prev"])
    def test_parse_previous(self, parser, text):
        """'p' scrolls up one screen."""
        assert parser.parse(text) == ScrollCommand(screens=-1)

    @pytest.mark.parametrize("text", ["j", "down"])
    def test_parse_step_down(self, parser, text):
        """'j' highlights the next selectable item."""
        assert parser.parse(text) == StepCommand(direction=1)

    @pytest.mark.parametrize("text", ["k", "UP"])
    def test_parse_step_up(self, parser, text):
        """'k' highlights the previous selectable item."""
        assert parser.parse(text) == StepCommand(direction=-1)

    def test_parse_select(self, parser):
        """'s N' highlights an item."""
        assert parser.parse("s 4") == SelectCommand(index=4)

    def test_parse_select_without_number(self, parser):
        """'s' needs exactly one number."""
        assert isinstance(parser.parse("s"), InvalidCommand)
        assert isinstance(parser.parse("s x"), InvalidCommand)

    def test_parse_bookmarks(self, parser):
        """'m' lists bookmarks, 'm N' opens one."""
        assert parser.parse("m") == BookmarksCommand()
        assert parser.parse("M 2") == BookmarksCommand(index=2)

    def test_parse_go_host_only(self, parser):
        """'g host' opens the root menu on port 70."""
        assert parser.parse("g sdf.org") == GoCommand(host="sdf.org", selector="", port=70)

    def test_parse_go_full(self, parser):
        """'g host selector port' keeps the selector's case."""
        cmd = parser.parse("g Gopher.Example /Phlog 7070")
        assert cmd == GoCommand(host="Gopher.Example", selector="/Phlog", port=7070)

    def test_parse_go_invalid_port(self, parser):
        """Non-numeric or out-of-range port is invalid."""
        assert isinstance(parser.parse("g host / abc"), InvalidCommand)
        assert isinstance(parser.parse("g host / 70000"), InvalidCommand)

    def test_parse_go_without_host(self, parser):
        """'g' needs a host."""
        cmd = parser.parse("g")
        assert isinstance(cmd, InvalidCommand)
        assert "Usage" in cmd.reason

    @pytest.mark.parametrize("text", ["?", "help", "HELP"])
    def test_parse_help(self, parser, text):
        """'?' and 'help' return HelpCommand."""
        assert isinstance(parser.parse(text), HelpCommand)

    @pytest.mark.parametrize("text", ["q", "quit"])
    def test_parse_quit(self, parser, text):
        """'q' and 'quit' return QuitCommand."""
        assert isinstance(parser.parse(text), QuitCommand)

    def test_parse_unknown(self, parser):
        """Unknown words are invalid."""
        cmd = parser.parse("xyz")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.original_input == "xyz"
        assert cmd.reason == "Unknown command"

    def test_parse_unexpected_arguments(self, parser):
        """Commands without arguments reject extra words."""
        assert isinstance(parser.parse("b now"), InvalidCommand)
