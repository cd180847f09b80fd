"""KMB stop repository adapter."""

import logging
from urllib.parse import quote

from kmb_route_browser.adapters.kmb_api.constants import ROUTE_STOP_PATH, STOP_PATH
from kmb_route_browser.adapters.kmb_api.http_client import KmbHttpClient
from kmb_route_browser.adapters.kmb_api.response_parser import KmbResponseParser
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.stop import Stop, StopRef
from kmb_route_browser.domain.ports.stop_repository import StopRepository

logger = logging.getLogger(__name__)


class KmbStopRepository(StopRepository):
    """Adapter for the KMB route-stop and stop endpoints."""

    def __init__(self, http_client: KmbHttpClient) -> None:
        self._http_client = http_client

    async def get_route_stops(self, route: Route) -> list[StopRef]:
        """Fetch the stop sequence of a route.

        Args:
            route: Route whose code, bound and service type select the sequence.

        Returns:
            Stop references in API response order.
        """
        path = ROUTE_STOP_PATH.format(
            route=quote(route.route, safe=""),
            bound=route.bound.wire_token,
            service_type=quote(route.service_type, safe=""),
        )
        data = await self._http_client.get_data(path)
        return KmbResponseParser.parse_route_stops(data, self._http_client.url_for(path))

    async def get_stop(self, stop_id: str) -> Stop:
        """Fetch a stop's details by its identifier."""
        path = STOP_PATH.format(stop_id=quote(stop_id, safe=""))
        data = await self._http_client.get_data(path)
        return KmbResponseParser.parse_stop(data, stop_id, self._http_client.url_for(path))
