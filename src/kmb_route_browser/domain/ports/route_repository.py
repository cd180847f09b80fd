"""Route repository port."""

from typing import Protocol

from kmb_route_browser.domain.models.route import Route


class RouteRepository(Protocol):
    """Port for retrieving the route catalog."""

    async def get_routes(self) -> list[Route]:
        """Fetch every route in API response order.

        Raises:
            NetworkFailure: If the request could not be completed.
            ParseFailure: If the response could not be parsed.
        """
        ...
