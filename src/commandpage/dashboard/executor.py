"""Runs configured commands and captures their output.

Each call spawns one child process with an explicit argument vector
(no shell) and blocks until it exits. Only standard output is kept.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

logger = logging.getLogger(__name__)

COMMAND_ERROR_PREFIX = "command error: "


def execute(command: str, args: Sequence[str]) -> str:
    """Run ``command`` with ``args`` and return its decoded stdout.

    The exit status is not inspected. If the process cannot be started
    at all, the error is returned as text prefixed with
    ``"command error: "`` instead of being raised.
    """
    argv = [command, *args]
    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        logger.warning("Failed to start %s: %s", command, e)
        return f"{COMMAND_ERROR_PREFIX}{e}"

    logger.debug(
        "%s exited with status %d (%d bytes of output)",
        command, completed.returncode, len(completed.stdout),
    )
    return completed.stdout.decode("utf-8", errors="replace")
