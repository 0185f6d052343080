"""Route table construction.

Every configuration entry is resolved once, at build time, into one of
three route kinds. The server registers them without inspecting
configuration again at request time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from commandpage.config.settings import CommandInfo, Configuration, StaticPathInfo
from commandpage.dashboard.executor import execute
from commandpage.dashboard.render import PageLink, render_command_result, render_index

logger = logging.getLogger(__name__)

INDEX_PATH = "/"


def mount_key(http_path: str) -> str:
    """Return the prefix a static mount actually matches (trailing slashes dropped)."""
    return http_path.rstrip("/") or "/"


@dataclass(frozen=True)
class IndexRoute:
    """Serves the index page rendered when the table was built."""

    page: str

    def handle(self) -> str:
        return self.page


@dataclass(frozen=True)
class CommandRoute:
    """Runs a command and renders its output on every request."""

    info: CommandInfo

    def handle(self) -> str:
        output = execute(self.info.command, self.info.args)
        return render_command_result(
            self.info.description,
            self.info.command,
            self.info.args,
            output,
        )


@dataclass(frozen=True)
class StaticMount:
    """Delegates a path prefix to the static file server."""

    info: StaticPathInfo


Route = Union[IndexRoute, CommandRoute, StaticMount]


def build_index_page(config: Configuration) -> str:
    """Render the index page for ``config``."""
    return render_index(
        config.main_page_title,
        [PageLink(c.http_path, c.description) for c in config.commands],
        [PageLink(s.http_path, s.fs_path) for s in config.index_static_paths],
    )


def build_route_table(config: Configuration) -> dict[str, Route]:
    """Map every configured http path to its route.

    Routes are inserted index first, then commands, then static mounts,
    each in configuration order. When two entries share a path the
    later one replaces the earlier one. Static mount paths are compared
    without trailing slashes, so ``/files`` and ``/files/`` are the same
    route.
    """
    table: dict[str, Route] = {INDEX_PATH: IndexRoute(build_index_page(config))}

    entries: list[tuple[str, Route]] = [
        (c.http_path, CommandRoute(c)) for c in config.commands
    ]
    entries += [(mount_key(s.http_path), StaticMount(s)) for s in config.static_paths]

    for path, route in entries:
        if path in table:
            logger.warning(
                "Duplicate http_path %s: %s replaces %s",
                path, type(route).__name__, type(table[path]).__name__,
            )
        table[path] = route

    logger.info("Built route table with %d routes", len(table))
    return table
