"""HTML rendering for the index and command-result pages.

Both entry points are pure string composition over Jinja2 templates
shipped in ``commandpage/templates``. Only the timestamp on command
pages varies between calls with identical inputs.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from datetime import datetime
from typing import NamedTuple

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("commandpage", "templates"),
    autoescape=select_autoescape(["html"]),
)


class PageLink(NamedTuple):
    """A link on the index page."""

    path: str
    label: str


def current_time_string(now_ns: int | None = None) -> str:
    """Format a local timestamp as ``YYYY-MM-DD HH:MM:SS.fffffffff +HHMM``."""
    if now_ns is None:
        now_ns = time.time_ns()
    seconds, nanos = divmod(now_ns, 1_000_000_000)
    local = datetime.fromtimestamp(seconds).astimezone()
    return f"{local:%Y-%m-%d %H:%M:%S}.{nanos:09d} {local:%z}"


def build_pre_text(
    command: str, args: Sequence[str], output: str, now_ns: int | None = None
) -> str:
    """Compose the preformatted block of a command-result page."""
    invocation = f"$ {command}"
    if args:
        invocation += " " + " ".join(args)
    return f"Now: {current_time_string(now_ns)}\n\n{invocation}\n\n{output}"


def _render(template_name: str, **context: object) -> str:
    try:
        return _env.get_template(template_name).render(**context)
    except TemplateError as e:
        logger.error("Error rendering %s: %s", template_name, e)
        return f"error executing template: {e}"


def render_index(
    title: str,
    commands: Sequence[PageLink],
    static_entries: Sequence[PageLink],
) -> str:
    """Render the index page.

    Args:
        title: Page title and top-level heading.
        commands: Command links, in listing order.
        static_entries: Static mount links to list. The "Static Paths"
            section is omitted entirely when this is empty.
    """
    return _render(
        "index.html",
        title=title,
        commands=commands,
        static_entries=static_entries,
    )


def render_command_result(
    description: str,
    command: str,
    args: Sequence[str],
    output: str,
    now_ns: int | None = None,
) -> str:
    """Render a command-result page.

    ``output`` is placed in the page verbatim; the echoed invocation and
    the description are escaped.
    """
    # escape everything but the command output
    header = build_pre_text(command, args, "", now_ns)
    return _render(
        "command.html",
        description=description,
        header=header,
        output=output,
    )
