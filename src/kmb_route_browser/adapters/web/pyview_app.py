"""PyView web adapter for browsing KMB routes."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from kmb_route_browser.adapters.config import AppConfig
from kmb_route_browser.domain.ports import (
    DisplayAdapter,
    RouteBrowserFactory,
    RouteCatalogService,
)

from .assets import CLIENT_JS_ROUTE, PAGE_STYLE, serve_client_js
from .broadcasters import CATALOG_TOPIC, StateBroadcaster
from .views.routes import create_route_browser_live_view

logger = logging.getLogger(__name__)


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter serving the route browser."""

    def __init__(
        self,
        route_store: RouteCatalogService,
        browser_factory: RouteBrowserFactory,
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            route_store: Shared route catalog, loaded once when the server starts.
            browser_factory: Creates one browser session per connected socket.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(route_store, "load", None)):
            raise TypeError("route_store must implement RouteCatalogService protocol")

        self.route_store = route_store
        self.browser_factory = browser_factory
        self.config = config
        self.broadcaster = StateBroadcaster()
        self._catalog_task: asyncio.Task[None] | None = None
        self._server: Any | None = None

    async def _load_catalog(self) -> None:
        """Load the route catalog and tell every mounted view to re-render."""
        routes = await self.route_store.load()
        logger.info(f"Route catalog ready with {len(routes)} route(s)")
        await self.broadcaster.broadcast_update(CATALOG_TOPIC)

    def start_catalog_load(self) -> asyncio.Task[None]:
        """Start loading the catalog in the background."""
        if self._catalog_task is None:
            self._catalog_task = asyncio.create_task(self._load_catalog())
        return self._catalog_task

    def build_app(self) -> Any:
        """Build the PyView ASGI application."""
        from pyview import PyView
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",  # Empty suffix to prevent " | LiveView" from appearing
            css=PAGE_STYLE,
        )
        app.routes.insert(0, Route(CLIENT_JS_ROUTE, serve_client_js, methods=["GET"]))

        live_view_class = create_route_browser_live_view(self.browser_factory)
        app.add_live_view("/", live_view_class)
        logger.info("Registered route browser at path '/'")

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))
        return app

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        app = self.build_app()

        # Views show the loading state until the catalog task completes
        self.start_catalog_load()

        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._catalog_task is not None and not self._catalog_task.done():
            self._catalog_task.cancel()
            try:
                await self._catalog_task
            except asyncio.CancelledError:
                logger.info("Route catalog load cancelled")
        if self._server:
            self._server.should_exit = True
