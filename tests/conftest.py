"""Shared test fixtures for the commandpage test suite.

Provides sample configurations and a helper that writes them to a
YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from commandpage.config.settings import CommandInfo, Configuration, StaticPathInfo


# ---------------------------------------------------------------------------
# Configuration Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def echo_command() -> CommandInfo:
    """A command that prints a fixed word."""
    return CommandInfo(
        http_path="/echo",
        description="Say hello",
        command="echo",
        args=["hello"],
    )


@pytest.fixture
def missing_command() -> CommandInfo:
    """A command whose executable does not exist."""
    return CommandInfo(
        http_path="/missing",
        description="Missing binary",
        command="definitely-not-a-real-binary-xyz",
        args=[],
    )


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A directory with one file to serve statically."""
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "readme.txt").write_text("static contents\n")
    return directory


@pytest.fixture
def sample_config(
    echo_command: CommandInfo, missing_command: CommandInfo, public_dir: Path
) -> Configuration:
    """A configuration with two commands and two static mounts, one listed."""
    return Configuration(
        listen_address="127.0.0.1:8080",
        main_page_title="Test Dashboard",
        commands=[echo_command, missing_command],
        static_paths=[
            StaticPathInfo(
                http_path="/files",
                fs_path=str(public_dir),
                include_in_main_page=True,
            ),
            StaticPathInfo(
                http_path="/hidden",
                fs_path=str(public_dir),
                include_in_main_page=False,
            ),
        ],
    )


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Raw configuration document as it appears in YAML."""
    return {
        "listen_address": "0.0.0.0:9000",
        "main_page_title": "Server",
        "commands": [
            {
                "http_path": "/uptime",
                "description": "uptime",
                "command": "uptime",
                "args": [],
            },
            {
                "http_path": "/df",
                "description": "df -h",
                "command": "df",
                "args": ["-h"],
            },
        ],
        "static_paths": [
            {
                "http_path": "/logs",
                "fs_path": "/var/log",
                "include_in_main_page": True,
            },
        ],
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a function that dumps a document to a YAML file."""

    def _write(data: Any) -> Path:
        path = tmp_path / "commandpage.yaml"
        path.write_text(yaml.safe_dump(data))
        return path

    return _write
