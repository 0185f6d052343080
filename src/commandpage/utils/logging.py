"""Log handler setup for the ``commandpage`` logger tree."""

from __future__ import annotations

import logging
import sys

from commandpage.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Attach stderr (and optionally file) handlers to ``commandpage``.

    Handlers from an earlier call are closed and replaced, so the CLI can
    call this again without duplicating output.

    Args:
        config: Level, format and optional log file. Defaults to INFO on
                stderr.
    """
    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger("commandpage")
    package_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging to %d handler(s) at %s", len(handlers), config.level)
