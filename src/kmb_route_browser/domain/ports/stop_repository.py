"""Stop repository port."""

from typing import Protocol

from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.stop import Stop, StopRef


class StopRepository(Protocol):
    """Port for retrieving stop sequences and stop details."""

    async def get_route_stops(self, route: Route) -> list[StopRef]:
        """Fetch the stop sequence of a route."""
        ...

    async def get_stop(self, stop_id: str) -> Stop:
        """Fetch a single stop by its identifier."""
        ...
