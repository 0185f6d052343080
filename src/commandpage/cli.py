"""Command-line interface for commandpage.

Loads the route table from a YAML file and serves the dashboard until
interrupted. Any configuration problem is fatal before the listener is
opened.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="commandpage",
        description="Serve configured shell commands as HTTP pages",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to YAML configuration file (default: $COMMANDPAGE_CONFIG_FILE)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (overrides COMMANDPAGE_LOGGING__LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the commandpage CLI."""
    args = parse_args(argv)

    from commandpage.config.settings import (
        ConfigurationError,
        Settings,
        load_configuration,
    )
    from commandpage.utils.logging import setup_logging

    settings = Settings()

    if args.log_level:
        settings.logging.level = args.log_level
    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    config_path = args.config or settings.config_file
    if config_path is None:
        logger.error("Config file required as command line argument")
        return 2

    try:
        config = load_configuration(config_path)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    from commandpage.dashboard.server import serve

    try:
        serve(config)
    except RuntimeError as e:
        # StaticFiles rejects a missing directory at startup
        logger.error("Cannot start server: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
