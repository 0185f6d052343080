"""FastAPI HTTP server for the command dashboard.

Registers the route table built from a Configuration: the index page
at ``/``, one GET route per command, and a StaticFiles mount per static
path. Command handlers are plain functions, so Starlette runs each one
in its worker thread pool while the child process runs.
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from commandpage import __version__
from commandpage.config.settings import Configuration
from commandpage.dashboard.routes import (
    CommandRoute,
    IndexRoute,
    Route,
    StaticMount,
    build_route_table,
)

logger = logging.getLogger(__name__)


def _html_endpoint(route: IndexRoute | CommandRoute) -> Callable[[], HTMLResponse]:
    def endpoint() -> HTMLResponse:
        return HTMLResponse(content=route.handle(), status_code=200)

    return endpoint


def _register(app: FastAPI, path: str, route: Route) -> None:
    if isinstance(route, StaticMount):
        app.mount(path, StaticFiles(directory=route.info.fs_path), name=path)
        logger.info("Mounted %s at %s", route.info.fs_path, path)
        return

    name = "index" if isinstance(route, IndexRoute) else route.info.description
    app.add_api_route(
        path,
        _html_endpoint(route),
        methods=["GET"],
        response_class=HTMLResponse,
        name=name,
        include_in_schema=False,
    )
    logger.debug("Registered %s at %s", type(route).__name__, path)


def create_app(config: Configuration) -> FastAPI:
    """Create and configure the FastAPI application for ``config``.

    The index page is rendered here, once, before any request is served.

    Raises:
        RuntimeError: If a static mount directory does not exist.
    """
    app = FastAPI(
        title=config.main_page_title,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    for path, route in build_route_table(config).items():
        _register(app, path, route)

    return app


def serve(config: Configuration) -> None:
    """Build the application and serve it on ``config.listen_address``."""
    app = create_app(config)
    logger.info("Listening on %s", config.listen_address)
    uvicorn.run(app, host=config.host, port=config.port, access_log=False)
