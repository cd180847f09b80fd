"""Main entry point for the KMB route browser application."""

import asyncio
import logging
import sys

import aiohttp

from kmb_route_browser.adapters.config import AppConfig
from kmb_route_browser.adapters.kmb_api import (
    KmbHttpClient,
    KmbRouteRepository,
    KmbStopRepository,
)
from kmb_route_browser.adapters.web import PyViewWebAdapter
from kmb_route_browser.application.services import RouteBrowser, RouteStore, StopResolver

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    logger.info(
        f"Using KMB API at {config.kmb_api_base_url} "
        f"(route matching: {config.route_match_policy}, language: {config.default_language})"
    )

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        http_client = KmbHttpClient(
            session,
            base_url=config.kmb_api_base_url,
            timeout_seconds=config.kmb_api_timeout,
        )

        # Initialize services
        route_store = RouteStore(KmbRouteRepository(http_client), config.match_policy)
        stop_resolver = StopResolver(KmbStopRepository(http_client))

        def browser_factory() -> RouteBrowser:
            return RouteBrowser(route_store, stop_resolver, language=config.language)

        display_adapter = PyViewWebAdapter(route_store, browser_factory, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
