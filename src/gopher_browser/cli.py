"""Command-line interface for the Gopher Browser."""

import argparse
import logging
import signal
import sys
from dataclasses import replace

from .config import Config, load_config
from .transport import SocketTransport
from .core import NavigationController
from .browser import GopherBrowser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gopher Browser - Browse Gopherspace from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Start at gopher.floodgap.com
  %(prog)s -c config.yaml               # Use specific config file
  %(prog)s --host sdf.org               # Start at another server
  %(prog)s --host example.org --port 7070 --selector /phlog
""",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    # Start page overrides
    parser.add_argument(
        "--host",
        help="Host to load at startup",
    )
    parser.add_argument(
        "--selector",
        help="Selector to load at startup",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port to load at startup",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.host:
        config = replace(config, start_host=args.host)
    if args.selector is not None:
        config = replace(config, start_selector=args.selector)
    if args.port is not None:
        if args.port < 1 or args.port > 65535:
            logger.error(f"Invalid port: {args.port}")
            return 1
        config = replace(config, start_port=args.port)

    # Create components
    transport = SocketTransport(
        timeout=config.timeout_seconds,
        max_response_bytes=config.max_response_bytes,
        encoding=config.encoding,
    )
    controller = NavigationController(
        transport,
        history_size=config.history_size,
        encoding=config.encoding,
        follow_unknown_as_menu=config.follow_unknown_as_menu,
    )
    browser = GopherBrowser(controller, config)

    # Set up signal handlers for clean shutdown
    def signal_handler(sig, frame):
        logger.info("Shutdown signal received")
        browser.stop()
        controller.close()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info(f"Starting at {config.start_host}:{config.start_port} {config.start_selector}")

    try:
        browser.start()
        browser.run()
    finally:
        browser.stop()
        controller.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
