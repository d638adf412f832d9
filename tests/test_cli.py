"""Tests for the CLI module."""

import logging
import pytest
from unittest.mock import patch

from gopher_browser.cli import setup_logging, parse_args, main


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_level_is_info(self):
        """Default logging level is INFO."""
        with patch("logging.basicConfig") as mock_config:
            setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO

    def test_verbose_level_is_debug(self):
        """Verbose logging level is DEBUG."""
        with patch("logging.basicConfig") as mock_config:
            setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG


class TestParseArgs:
    """Tests for parse_args function."""

    def test_no_args(self):
        """No arguments uses defaults."""
        with patch("sys.argv", ["gopher-browser"]):
            args = parse_args()
            assert args.config is None
            assert args.verbose is False
            assert args.host is None
            assert args.selector is None
            assert args.port is None

    def test_config_file(self):
        """--config specifies config file."""
        with patch("sys.argv", ["gopher-browser", "-c", "config.yaml"]):
            args = parse_args()
            assert args.config == "config.yaml"

    def test_verbose_flag(self):
        """--verbose enables verbose mode."""
        with patch("sys.argv", ["gopher-browser", "-v"]):
            args = parse_args()
            assert args.verbose is True

    def test_start_page(self):
        """--host, --selector and --port set the start page."""
        with patch("sys.argv", ["gopher-browser", "--host", "sdf.org", "--selector", "/users", "--port", "7070"]):
            args = parse_args()
            assert args.host == "sdf.org"
            assert args.selector == "/users"
            assert args.port == 7070

    def test_port_must_be_integer(self):
        """Non-numeric port is rejected by argparse."""
        with patch("sys.argv", ["gopher-browser", "--port", "seventy"]):
            with pytest.raises(SystemExit):
                parse_args()


class TestMain:
    """Tests for main entry point."""

    @pytest.fixture
    def mocks(self):
        """Patch out the network, the terminal loop and signal handlers."""
        with patch("gopher_browser.cli.SocketTransport") as transport_cls, \
             patch("gopher_browser.cli.GopherBrowser") as browser_cls, \
             patch("gopher_browser.cli.signal.signal"), \
             patch("gopher_browser.cli.setup_logging"):
            yield transport_cls, browser_cls

    def test_missing_config_file(self, mocks):
        """Missing config file exits with an error code."""
        with patch("sys.argv", ["gopher-browser", "-c", "/nonexistent/config.yaml"]):
            assert main() == 1

    def test_invalid_port(self, mocks):
        """Out of range port exits with an error code."""
        _, browser_cls = mocks
        with patch("sys.argv", ["gopher-browser", "--port", "0"]):
            assert main() == 1
        browser_cls.assert_not_called()

    def test_runs_browser(self, mocks):
        """main builds the components and runs the browser."""
        transport_cls, browser_cls = mocks
        with patch("sys.argv", ["gopher-browser"]):
            assert main() == 0

        transport_cls.assert_called_once_with(
            timeout=15, max_response_bytes=512 * 1024, encoding="utf-8"
        )
        browser = browser_cls.return_value
        browser.start.assert_called_once()
        browser.run.assert_called_once()
        browser.stop.assert_called_once()

    def test_start_page_overrides(self, mocks):
        """Command line start page overrides the config."""
        _, browser_cls = mocks
        with patch("sys.argv", ["gopher-browser", "--host", "sdf.org", "--selector", "/users", "--port", "7070"]):
            main()

        config = browser_cls.call_args[0][1]
        assert config.start_host == "sdf.org"
        assert config.start_selector == "/users"
        assert config.start_port == 7070
