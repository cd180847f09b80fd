"""Route store service."""

import logging

from kmb_route_browser.domain.errors import KmbApiError
from kmb_route_browser.domain.models.match_policy import RouteMatchPolicy
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)


class RouteStore:
    """Holds the route catalog fetched once at startup and filters it."""

    def __init__(
        self,
        route_repository: RouteRepository,
        match_policy: RouteMatchPolicy = RouteMatchPolicy.SUBSTRING,
    ) -> None:
        """Initialize with a route repository and the search matching policy.

        Args:
            route_repository: Repository used to fetch the catalog.
            match_policy: How search queries are compared against route codes.
        """
        self._route_repository = route_repository
        self.match_policy = match_policy
        self._routes: list[Route] = []
        self._is_loading = True

    @property
    def routes(self) -> list[Route]:
        return self._routes

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    async def load(self) -> list[Route]:
        """Fetch the full route catalog.

        A failed fetch is logged and surfaces as an empty catalog; callers
        cannot tell it apart from an empty response. The loading flag is
        cleared either way.

        Returns:
            The catalog in API response order.
        """
        try:
            routes = await self._route_repository.get_routes()
        except KmbApiError as e:
            logger.error(f"Failed to load route catalog: {e}")
            routes = []
        finally:
            self._is_loading = False

        self._routes = routes
        logger.info(f"Loaded {len(routes)} route(s)")
        return routes

    def filter(self, catalog: list[Route], query: str) -> list[Route]:
        """Return the routes of ``catalog`` whose code matches ``query``.

        An empty query returns ``catalog`` itself. Otherwise the matching
        subsequence is returned in the original relative order.
        """
        if not query:
            return catalog
        return [route for route in catalog if self.match_policy.matches(route.route, query)]
