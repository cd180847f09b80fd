"""KMB route repository adapter."""

import logging

from kmb_route_browser.adapters.kmb_api.constants import ROUTE_LIST_PATH
from kmb_route_browser.adapters.kmb_api.http_client import KmbHttpClient
from kmb_route_browser.adapters.kmb_api.response_parser import KmbResponseParser
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)


class KmbRouteRepository(RouteRepository):
    """Adapter for the KMB route list endpoint."""

    def __init__(self, http_client: KmbHttpClient) -> None:
        self._http_client = http_client

    async def get_routes(self) -> list[Route]:
        """Fetch the complete route catalog.

        Returns:
            Routes in API response order.
        """
        data = await self._http_client.get_data(ROUTE_LIST_PATH)
        routes = KmbResponseParser.parse_routes(data, self._http_client.url_for(ROUTE_LIST_PATH))
        logger.debug(f"Parsed {len(routes)} routes")
        return routes
